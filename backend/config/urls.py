from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/proyectos/', include('apps.proyectos.urls', namespace='proyectos')),
    path('api/core/', include('apps.core.urls', namespace='core')),
]
