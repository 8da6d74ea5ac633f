from django.contrib import admin

from apps.proyectos import services
from .models import Teacher, Project, TeacherAuditRecord


@admin.register(Teacher)
class TeacherAdmin(admin.ModelAdmin):
    list_display = ('id', 'document_number', 'full_name', 'title', 'years_experience', 'employment_type')
    search_fields = ('document_number', 'full_name')
    list_filter = ('employment_type',)

    # Route admin writes through the service so audit rows are still written
    def save_model(self, request, obj, form, change):
        data = {name: form.cleaned_data.get(name) for name in form.cleaned_data}
        if change:
            services.update_teacher(obj.pk, data, request.user)
        else:
            obj.pk = services.create_teacher(data, request.user)

    def delete_model(self, request, obj):
        services.delete_teacher(obj.pk, request.user)

    def has_delete_permission(self, request, obj=None):
        # bulk delete_queryset would skip the audit trail
        return obj is not None and super().has_delete_permission(request, obj)


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'lead_teacher', 'start_date', 'end_date', 'budget', 'hours')
    search_fields = ('name', 'lead_teacher__full_name')
    list_filter = ('lead_teacher__employment_type',)
    list_select_related = ('lead_teacher',)


@admin.register(TeacherAuditRecord)
class TeacherAuditRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'kind', 'teacher_id', 'document_number', 'full_name', 'recorded_at', 'principal')
    search_fields = ('document_number', 'full_name', 'principal')
    list_filter = ('kind',)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
