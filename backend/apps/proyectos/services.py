"""
CRUD service for teachers and projects.

Applies null → 0 defaulting, resolves the acting principal from the Django
user, delegates to the entity store and hands back the read-back entity.
Store errors (ConstraintViolation, NotFound, ReferentialConstraint) are
never caught here.
"""
import logging

from django.conf import settings

from apps.proyectos import store

logger = logging.getLogger(__name__)

TEACHER_NUMERIC_DEFAULTS = {'years_experience': 0}
PROJECT_NUMERIC_DEFAULTS = {'budget': 0, 'hours': 0}


# ══════════════════════════════════════════════════
# HELPERS
# ══════════════════════════════════════════════════

def _with_defaults(data, defaults):
    """Copy of data where absent or null numeric fields take their default."""
    values = dict(data)
    for name, default in defaults.items():
        if values.get(name) is None:
            values[name] = default
    return values


def principal_for(user):
    """Audit principal for a request user; anonymous/system callers get the configured one."""
    if user is not None and getattr(user, 'is_authenticated', False):
        return user.get_username()
    return settings.AUDIT_SYSTEM_PRINCIPAL


# ══════════════════════════════════════════════════
# TEACHERS
# ══════════════════════════════════════════════════

def create_teacher(data, user=None):
    """Returns the new teacher id."""
    teacher_id = store.create_teacher(_with_defaults(data, TEACHER_NUMERIC_DEFAULTS))
    logger.info('Teacher %s created by %s', teacher_id, principal_for(user))
    return teacher_id


def read_teacher(teacher_id):
    return store.read_teacher(teacher_id)


def update_teacher(teacher_id, data, user=None):
    """Full replace. Returns the teacher as stored after the update."""
    principal = principal_for(user)
    store.update_teacher(
        teacher_id,
        _with_defaults(data, TEACHER_NUMERIC_DEFAULTS),
        principal=principal,
    )
    logger.info('Teacher %s updated by %s', teacher_id, principal)
    return store.read_teacher(teacher_id)


def delete_teacher(teacher_id, user=None):
    principal = principal_for(user)
    store.delete_teacher(teacher_id, principal=principal)
    logger.info('Teacher %s deleted by %s', teacher_id, principal)
    return True


def list_teachers():
    return store.list_teachers()


# ══════════════════════════════════════════════════
# PROJECTS
# ══════════════════════════════════════════════════

def create_project(data, user=None):
    """Returns the new project id."""
    project_id = store.create_project(_with_defaults(data, PROJECT_NUMERIC_DEFAULTS))
    logger.info('Project %s created by %s', project_id, principal_for(user))
    return project_id


def read_project(project_id):
    return store.read_project(project_id)


def update_project(project_id, data, user=None):
    """Full replace. Returns the project joined with its lead teacher."""
    store.update_project(project_id, _with_defaults(data, PROJECT_NUMERIC_DEFAULTS))
    logger.info('Project %s updated by %s', project_id, principal_for(user))
    return store.read_project(project_id)


def delete_project(project_id, user=None):
    store.delete_project(project_id)
    logger.info('Project %s deleted by %s', project_id, principal_for(user))
    return True


def list_projects():
    return store.list_projects()
