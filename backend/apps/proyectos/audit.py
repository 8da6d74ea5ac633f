"""
Teacher audit trail.

The entity store calls record() from inside the same transaction.atomic()
block that mutates the teacher, so a failed audit write rolls the mutation
back with it.
"""
from django.db import transaction
from django.utils import timezone

from apps.proyectos.enums import AuditKind
from apps.proyectos.models import TeacherAuditRecord

SNAPSHOT_FIELDS = (
    'document_number', 'full_name', 'title',
    'years_experience', 'address', 'employment_type',
)


def snapshot(teacher):
    """Copy of every teacher domain field, keyed as on the audit row."""
    data = {'teacher_id': teacher.pk}
    for field in SNAPSHOT_FIELDS:
        data[field] = getattr(teacher, field)
    return data


def record(kind, teacher_snapshot, principal, timestamp=None):
    """Append one audit row. Only valid inside the mutation's atomic block."""
    if not transaction.get_connection().in_atomic_block:
        raise RuntimeError(
            'Teacher audit records must be written inside the mutating transaction.'
        )
    if kind not in AuditKind.values:
        raise ValueError(f'Unknown audit kind: {kind}')

    return TeacherAuditRecord.objects.create(
        kind=kind,
        recorded_at=timestamp or timezone.now(),
        principal=principal,
        **teacher_snapshot,
    )


def list_updates():
    return list(
        TeacherAuditRecord.objects.filter(kind=AuditKind.UPDATED).order_by('-id')
    )


def list_deletes():
    return list(
        TeacherAuditRecord.objects.filter(kind=AuditKind.DELETED).order_by('-id')
    )


def history_for(teacher_id):
    """Every record of one teacher, newest first; works after deletion too."""
    return list(
        TeacherAuditRecord.objects.filter(teacher_id=teacher_id).order_by('-id')
    )
