from django.db import models


# --- Teacher audit enums ---

class AuditKind(models.TextChoices):
    UPDATED = 'UPDATED', 'Updated'
    DELETED = 'DELETED', 'Deleted'


# --- Project status (derived, never stored) ---

class ProjectStatus(models.TextChoices):
    NOT_STARTED = 'Not started', 'Not started'
    IN_PROGRESS_OPEN = 'In progress (no end date)', 'In progress (no end date)'
    IN_PROGRESS = 'In progress', 'In progress'
    FINISHED = 'Finished/Overdue', 'Finished/Overdue'
    NOT_FOUND = 'Not found', 'Not found'


# --- Common employment types (free-form field; these are suggestions only) ---

class EmploymentType(models.TextChoices):
    FULL_TIME = 'Tiempo completo', 'Tiempo completo'
    ADJUNCT = 'Cátedra', 'Cátedra'
