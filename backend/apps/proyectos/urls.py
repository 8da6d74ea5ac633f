"""
URL registry under /api/proyectos/
"""
from django.urls import path
from apps.proyectos.views import (
    TeacherListCreateView,
    TeacherDetailView,
    TeacherHistoryView,
    TeacherAverageBudgetView,
    ProjectListCreateView,
    ProjectDetailView,
    ProjectCostPerHourView,
    ProjectStatusView,
    EmploymentTypeCountView,
    AuditUpdatesView,
    AuditDeletesView,
)

app_name = 'proyectos'

urlpatterns = [
    # Teachers
    path('teachers/', TeacherListCreateView.as_view(), name='teacher-list'),
    path('teachers/<int:pk>/', TeacherDetailView.as_view(), name='teacher-detail'),
    path('teachers/<int:pk>/history/', TeacherHistoryView.as_view(), name='teacher-history'),
    path('teachers/<int:pk>/average-budget/', TeacherAverageBudgetView.as_view(), name='teacher-average-budget'),

    # Projects
    path('projects/', ProjectListCreateView.as_view(), name='project-list'),
    path('projects/<int:pk>/', ProjectDetailView.as_view(), name='project-detail'),
    path('projects/<int:pk>/cost-per-hour/', ProjectCostPerHourView.as_view(), name='project-cost-per-hour'),
    path('projects/<int:pk>/status/', ProjectStatusView.as_view(), name='project-status'),

    # Metrics
    path('metrics/projects-by-employment-type/', EmploymentTypeCountView.as_view(), name='projects-by-employment-type'),

    # Audit trail
    path('audit/updates/', AuditUpdatesView.as_view(), name='audit-updates'),
    path('audit/deletes/', AuditDeletesView.as_view(), name='audit-deletes'),
]
