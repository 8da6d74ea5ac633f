"""
Typed errors for the teacher/project core.
Each maps to an HTTP status through DRF's default exception handler.
"""
from rest_framework.exceptions import APIException


class ConstraintViolation(APIException):
    """A field invariant failed (negative value, bad dates, duplicate key) → 400."""
    status_code = 400
    default_detail = 'Constraint violated.'
    default_code = 'constraint_violation'


class NotFound(APIException):
    """Referenced teacher or project does not exist → 404."""
    status_code = 404
    default_detail = 'Entity not found.'
    default_code = 'not_found'


class ReferentialConstraint(APIException):
    """Teacher still leads projects and cannot be deleted → 409 Conflict."""
    status_code = 409
    default_detail = 'Entity is still referenced.'
    default_code = 'referential_constraint'
