"""
Read + write serializers for teachers, projects and the audit trail.
Write serializers only shape input; invariants are enforced by the store.
"""
from django.utils import timezone
from rest_framework import serializers

from apps.proyectos.metrics import classify_status, compute_cost_per_hour
from apps.proyectos.models import Teacher, Project, TeacherAuditRecord


# ──────────────────────────────────────────────────
# READ SERIALIZERS
# ──────────────────────────────────────────────────

class TeacherSerializer(serializers.ModelSerializer):
    class Meta:
        model = Teacher
        fields = [
            'id', 'document_number', 'full_name', 'title',
            'years_experience', 'address', 'employment_type',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class ProjectSerializer(serializers.ModelSerializer):
    lead_teacher_id = serializers.IntegerField(read_only=True)
    lead_teacher_name = serializers.CharField(
        source='lead_teacher.full_name', read_only=True)
    status = serializers.SerializerMethodField()
    cost_per_hour = serializers.SerializerMethodField()

    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'start_date', 'end_date',
            'budget', 'hours', 'lead_teacher_id', 'lead_teacher_name',
            'status', 'cost_per_hour',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_status(self, obj):
        return classify_status(obj.start_date, obj.end_date, timezone.localdate())

    def get_cost_per_hour(self, obj):
        return str(compute_cost_per_hour(obj.budget, obj.hours))


class TeacherAuditRecordSerializer(serializers.ModelSerializer):
    kind_display = serializers.CharField(source='get_kind_display', read_only=True)

    class Meta:
        model = TeacherAuditRecord
        fields = [
            'id', 'kind', 'kind_display', 'teacher_id',
            'document_number', 'full_name', 'title',
            'years_experience', 'address', 'employment_type',
            'recorded_at', 'principal',
        ]
        read_only_fields = fields


# ──────────────────────────────────────────────────
# WRITE SERIALIZERS
# ──────────────────────────────────────────────────

class TeacherWriteSerializer(serializers.Serializer):
    """Create / full update of a teacher."""
    document_number = serializers.CharField(max_length=20)
    full_name = serializers.CharField(max_length=120)
    title = serializers.CharField(max_length=120, required=False,
                                  allow_null=True, allow_blank=True, default=None)
    years_experience = serializers.IntegerField(min_value=0, required=False,
                                                allow_null=True, default=None)
    address = serializers.CharField(max_length=180, required=False,
                                    allow_null=True, allow_blank=True, default=None)
    employment_type = serializers.CharField(max_length=40, required=False,
                                            allow_null=True, allow_blank=True,
                                            default=None)


class ProjectWriteSerializer(serializers.Serializer):
    """Create / full update of a project."""
    name = serializers.CharField(max_length=120)
    description = serializers.CharField(max_length=400, required=False,
                                        allow_null=True, allow_blank=True,
                                        default=None)
    start_date = serializers.DateField()
    end_date = serializers.DateField(required=False, allow_null=True, default=None)
    budget = serializers.DecimalField(max_digits=12, decimal_places=2,
                                      min_value=0, required=False,
                                      allow_null=True, default=None)
    hours = serializers.IntegerField(min_value=0, required=False,
                                     allow_null=True, default=None)
    lead_teacher_id = serializers.IntegerField()


class EmploymentTypeQuerySerializer(serializers.Serializer):
    employment_type = serializers.CharField(max_length=40)
