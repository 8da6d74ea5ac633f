"""
Derived metrics over the current teacher/project rows.

Read-only, computed on every call, never cached. Unknown ids are not errors
here: they produce the documented zero/sentinel value instead.
"""
from decimal import Decimal, ROUND_HALF_UP

from django.db.models import Avg
from django.utils import timezone

from apps.proyectos.enums import ProjectStatus
from apps.proyectos.models import Project

CENTS = Decimal('0.01')
ZERO = Decimal('0.00')


def _money(value):
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


# ══════════════════════════════════════════════════
# PURE KERNELS
# ══════════════════════════════════════════════════

def compute_cost_per_hour(budget, hours):
    if not hours or hours <= 0:
        return ZERO
    return _money(Decimal(str(budget)) / Decimal(hours))


def classify_status(start_date, end_date, today):
    """Date-only state machine; checks run in this order."""
    if today < start_date:
        return ProjectStatus.NOT_STARTED.value
    if end_date is None:
        return ProjectStatus.IN_PROGRESS_OPEN.value
    if today <= end_date:
        return ProjectStatus.IN_PROGRESS.value
    return ProjectStatus.FINISHED.value


# ══════════════════════════════════════════════════
# METRICS
# ══════════════════════════════════════════════════

def _project_row(project_id, *fields):
    """One project's values, or None when the id matches no project."""
    try:
        return Project.objects.filter(pk=project_id).values_list(*fields).first()
    except (ValueError, TypeError):
        return None


def average_budget(teacher_id):
    """Mean budget of the teacher's projects; 0.00 when there are none."""
    try:
        result = Project.objects.filter(
            lead_teacher_id=teacher_id
        ).aggregate(avg=Avg('budget'))['avg']
    except (ValueError, TypeError):
        return ZERO
    if result is None:
        return ZERO
    return _money(result)


def cost_per_hour(project_id):
    """budget / hours to 2 decimals; 0.00 for zero hours or an unknown project."""
    row = _project_row(project_id, 'budget', 'hours')
    if row is None:
        return ZERO
    budget, hours = row
    return compute_cost_per_hour(budget, hours)


def count_by_employment_type(employment_type):
    """Projects whose lead teacher has exactly this employment_type (case-sensitive)."""
    if employment_type is None:
        return 0
    return Project.objects.filter(
        lead_teacher__employment_type__exact=employment_type
    ).count()


def status(project_id, today=None):
    row = _project_row(project_id, 'start_date', 'end_date')
    if row is None:
        return ProjectStatus.NOT_FOUND.value
    if today is None:
        today = timezone.localdate()
    start_date, end_date = row
    return classify_status(start_date, end_date, today)
