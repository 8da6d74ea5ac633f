"""
Entity store for teachers and projects.

Every write path runs inside transaction.atomic() and locks the rows it
touches with select_for_update(), so two writers on the same teacher or
project serialize. Teacher updates and deletes append their audit record
inside that same block.
"""
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from django.utils.dateparse import parse_date

from apps.proyectos import audit
from apps.proyectos.enums import AuditKind
from apps.proyectos.exceptions import (
    ConstraintViolation, NotFound, ReferentialConstraint,
)
from apps.proyectos.models import Teacher, Project

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════
# FIELD RULES
# ══════════════════════════════════════════════════

# name -> (max_length, required)
TEACHER_TEXT_FIELDS = {
    'document_number': (20, True),
    'full_name':       (120, True),
    'title':           (120, False),
    'address':         (180, False),
    'employment_type': (40, False),
}

PROJECT_TEXT_FIELDS = {
    'name':        (120, True),
    'description': (400, False),
}

CENTS = Decimal('0.01')
# DECIMAL(12,2)
MAX_BUDGET = Decimal('9999999999.99')
# IntegerField range
MAX_INT = 2147483647


# ══════════════════════════════════════════════════
# HELPERS
# ══════════════════════════════════════════════════

def _rejected(exc_class, message):
    logger.warning('Write rejected (%s): %s', exc_class.default_code, message)
    return exc_class(message)


def _clean_text(fields, rules):
    values = {}
    for name, (max_length, required) in rules.items():
        value = fields.get(name)
        if value is None or (required and not str(value).strip()):
            if required:
                raise _rejected(ConstraintViolation, f'{name} is required.')
            values[name] = None
            continue
        if not isinstance(value, str):
            raise _rejected(ConstraintViolation, f'{name} must be a string.')
        if len(value) > max_length:
            raise _rejected(
                ConstraintViolation,
                f'{name} exceeds {max_length} characters.',
            )
        values[name] = value
    return values


def _non_negative_int(value, name):
    """null → 0; anything negative or non-integral is rejected."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise _rejected(ConstraintViolation, f'{name} must be an integer.')
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise _rejected(ConstraintViolation, f'{name} must be an integer.')
    if isinstance(value, (float, Decimal)) and number != value:
        raise _rejected(ConstraintViolation, f'{name} must be an integer.')
    if number < 0:
        raise _rejected(ConstraintViolation, f'{name} must be >= 0, got {number}.')
    if number > MAX_INT:
        raise _rejected(ConstraintViolation, f'{name} exceeds {MAX_INT}.')
    return number


def _non_negative_decimal(value, name):
    """null → 0.00; stored with two decimal places."""
    if value is None:
        return Decimal('0.00')
    if isinstance(value, bool):
        raise _rejected(ConstraintViolation, f'{name} must be a decimal number.')
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise _rejected(ConstraintViolation, f'{name} must be a decimal number.')
    if not number.is_finite():
        raise _rejected(ConstraintViolation, f'{name} must be a finite number.')
    if number < 0:
        raise _rejected(ConstraintViolation, f'{name} must be >= 0, got {number}.')
    if number > MAX_BUDGET:
        raise _rejected(ConstraintViolation, f'{name} exceeds {MAX_BUDGET}.')
    return number.quantize(CENTS, rounding=ROUND_HALF_UP)


def _as_date(value, name, required):
    if value is None or value == '':
        if required:
            raise _rejected(ConstraintViolation, f'{name} is required.')
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = parse_date(str(value))
    except ValueError:
        parsed = None
    if parsed is None:
        raise _rejected(ConstraintViolation, f'{name} is not a valid date: {value!r}.')
    return parsed


def _teacher_values(fields):
    values = _clean_text(fields, TEACHER_TEXT_FIELDS)
    values['years_experience'] = _non_negative_int(
        fields.get('years_experience'), 'years_experience')
    return values


def _project_values(fields):
    """Validated column values plus the requested lead teacher id."""
    values = _clean_text(fields, PROJECT_TEXT_FIELDS)
    start_date = _as_date(fields.get('start_date'), 'start_date', required=True)
    end_date = _as_date(fields.get('end_date'), 'end_date', required=False)
    if end_date is not None and end_date < start_date:
        raise _rejected(
            ConstraintViolation,
            f'end_date {end_date} is before start_date {start_date}.',
        )
    values.update(
        start_date=start_date,
        end_date=end_date,
        budget=_non_negative_decimal(fields.get('budget'), 'budget'),
        hours=_non_negative_int(fields.get('hours'), 'hours'),
    )

    lead_teacher_id = fields.get('lead_teacher_id')
    if lead_teacher_id is None:
        raise _rejected(ConstraintViolation, 'lead_teacher_id is required.')
    return values, lead_teacher_id


def _principal(principal):
    return principal or settings.AUDIT_SYSTEM_PRINCIPAL


def _duplicate_document(document_number):
    return _rejected(
        ConstraintViolation,
        f'A teacher with document_number {document_number} already exists.',
    )


def _lock_teacher(teacher_id):
    try:
        return Teacher.objects.select_for_update().get(pk=teacher_id)
    except (Teacher.DoesNotExist, ValueError, TypeError):
        raise _rejected(NotFound, f'Teacher {teacher_id} not found.')


def _lock_project(project_id):
    try:
        return Project.objects.select_for_update().get(pk=project_id)
    except (Project.DoesNotExist, ValueError, TypeError):
        raise _rejected(NotFound, f'Project {project_id} not found.')


# ══════════════════════════════════════════════════
# TEACHERS
# ══════════════════════════════════════════════════

def create_teacher(fields):
    """Insert a teacher and return its id."""
    values = _teacher_values(fields)

    with transaction.atomic():
        if Teacher.objects.filter(document_number=values['document_number']).exists():
            raise _duplicate_document(values['document_number'])
        try:
            with transaction.atomic():
                teacher = Teacher.objects.create(**values)
        except IntegrityError:
            # lost a race on uq_teacher_document
            raise _duplicate_document(values['document_number'])

    return teacher.pk


def read_teacher(teacher_id):
    try:
        return Teacher.objects.get(pk=teacher_id)
    except (Teacher.DoesNotExist, ValueError, TypeError):
        raise NotFound(f'Teacher {teacher_id} not found.')


def update_teacher(teacher_id, fields, principal=None):
    """
    Full replace of every mutable field. Appends an UPDATED audit record
    holding the post-update values before the transaction commits.
    """
    with transaction.atomic():
        teacher = _lock_teacher(teacher_id)
        values = _teacher_values(fields)

        clash = Teacher.objects.filter(
            document_number=values['document_number']
        ).exclude(pk=teacher.pk)
        if clash.exists():
            raise _duplicate_document(values['document_number'])

        for name, value in values.items():
            setattr(teacher, name, value)
        try:
            with transaction.atomic():
                teacher.save(update_fields=[*values, 'updated_at'])
        except IntegrityError:
            raise _duplicate_document(values['document_number'])

        audit.record(AuditKind.UPDATED, audit.snapshot(teacher), _principal(principal))

    return teacher


def delete_teacher(teacher_id, principal=None):
    """Remove a teacher that leads no projects; appends a DELETED audit record."""
    with transaction.atomic():
        teacher = _lock_teacher(teacher_id)

        led = Project.objects.filter(lead_teacher_id=teacher.pk).count()
        if led:
            raise _rejected(
                ReferentialConstraint,
                f'Teacher {teacher.pk} leads {led} project(s); '
                f'delete or reassign them first.',
            )

        before = audit.snapshot(teacher)
        try:
            with transaction.atomic():
                teacher.delete()
        except (ProtectedError, IntegrityError):
            raise _rejected(
                ReferentialConstraint,
                f'Teacher {before["teacher_id"]} is still referenced by projects.',
            )

        audit.record(AuditKind.DELETED, before, _principal(principal))


def list_teachers():
    return list(Teacher.objects.order_by('id'))


# ══════════════════════════════════════════════════
# PROJECTS
# ══════════════════════════════════════════════════

def create_project(fields):
    """Insert a project and return its id. The lead teacher row stays locked until commit."""
    values, lead_teacher_id = _project_values(fields)

    with transaction.atomic():
        lead = _lock_teacher(lead_teacher_id)
        project = Project.objects.create(lead_teacher=lead, **values)

    return project.pk


def read_project(project_id):
    """Project joined with its lead teacher (exposes lead_teacher_name)."""
    try:
        return Project.objects.select_related('lead_teacher').get(pk=project_id)
    except (Project.DoesNotExist, ValueError, TypeError):
        raise NotFound(f'Project {project_id} not found.')


def update_project(project_id, fields):
    with transaction.atomic():
        project = _lock_project(project_id)
        values, lead_teacher_id = _project_values(fields)
        lead = _lock_teacher(lead_teacher_id)

        for name, value in values.items():
            setattr(project, name, value)
        project.lead_teacher = lead
        project.save()

    return project


def delete_project(project_id):
    # Projects carry no audit trail
    with transaction.atomic():
        project = _lock_project(project_id)
        project.delete()


def list_projects():
    return list(Project.objects.select_related('lead_teacher').order_by('id'))
