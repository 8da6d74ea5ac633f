from django.db import models
from django.db.models import F, Q

from apps.core.models import TimestampMixin, AppendOnlyModel
from .enums import AuditKind


# ──────────────────────────────────────────────────
# Teacher + Project
# ──────────────────────────────────────────────────

class Teacher(TimestampMixin):
    """
    A docente who may lead one or more projects.
    Every update and delete leaves a TeacherAuditRecord behind.
    """
    document_number = models.CharField(max_length=20,
                                       help_text="Cédula, pasaporte, etc.")
    full_name = models.CharField(max_length=120)
    title = models.CharField(max_length=120, blank=True, null=True,
                             help_text="Título académico")
    years_experience = models.IntegerField(default=0)
    address = models.CharField(max_length=180, blank=True, null=True)
    employment_type = models.CharField(max_length=40, blank=True, null=True,
                                       help_text="e.g. Tiempo completo, Cátedra")

    class Meta:
        verbose_name = 'Teacher'
        verbose_name_plural = 'Teachers'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['document_number'],
                                    name='uq_teacher_document'),
            models.CheckConstraint(condition=Q(years_experience__gte=0),
                                   name='ck_teacher_years'),
        ]

    def __str__(self):
        return f"{self.document_number} - {self.full_name}"


class Project(TimestampMixin):
    """
    A tracked initiative led by exactly one teacher.
    Projects are not audited.
    """
    name = models.CharField(max_length=120)
    description = models.CharField(max_length=400, blank=True, null=True)
    start_date = models.DateField()
    end_date = models.DateField(blank=True, null=True,
                                help_text="null while the project is open-ended")
    budget = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    hours = models.IntegerField(default=0)
    lead_teacher = models.ForeignKey(Teacher,
                                     on_delete=models.PROTECT,
                                     related_name='led_projects')

    class Meta:
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(condition=Q(hours__gte=0),
                                   name='ck_project_hours'),
            models.CheckConstraint(condition=Q(budget__gte=0),
                                   name='ck_project_budget'),
            models.CheckConstraint(
                condition=Q(end_date__isnull=True) | Q(end_date__gte=F('start_date')),
                name='ck_project_dates'),
        ]

    def __str__(self):
        return self.name

    @property
    def lead_teacher_name(self):
        return self.lead_teacher.full_name


# ──────────────────────────────────────────────────
# Teacher audit trail (AppendOnly)
# ──────────────────────────────────────────────────

class TeacherAuditRecord(AppendOnlyModel):
    """
    Snapshot of a teacher taken when it is updated or deleted.
    teacher_id is a plain integer so history survives the teacher row.
    """
    kind = models.CharField(max_length=10, choices=AuditKind.choices)
    teacher_id = models.BigIntegerField(db_index=True)
    document_number = models.CharField(max_length=20)
    full_name = models.CharField(max_length=120)
    title = models.CharField(max_length=120, blank=True, null=True)
    years_experience = models.IntegerField()
    address = models.CharField(max_length=180, blank=True, null=True)
    employment_type = models.CharField(max_length=40, blank=True, null=True)
    recorded_at = models.DateTimeField(help_text="UTC, captured at write time")
    principal = models.CharField(max_length=128,
                                 help_text="username or system principal")

    class Meta:
        verbose_name = 'Teacher Audit Record'
        verbose_name_plural = 'Teacher Audit Records'
        ordering = ['-id']
        indexes = [
            models.Index(fields=['kind'], name='idx_audit_kind'),
        ]

    def __str__(self):
        return f"{self.get_kind_display()} teacher {self.teacher_id} @ {self.recorded_at}"
