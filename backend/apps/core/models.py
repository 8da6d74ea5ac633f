from django.db import models
from django.core.exceptions import ValidationError


class TimestampMixin(models.Model):
    """Mixin that adds created_at and updated_at fields to any model."""
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class AppendOnlyQuerySet(models.QuerySet):
    """Blocks the bulk paths that would bypass AppendOnlyModel.save/delete."""

    def update(self, **kwargs):
        raise ValidationError(
            f"{self.model.__name__} rows are append-only; bulk update refused."
        )

    def delete(self):
        raise ValidationError(
            f"{self.model.__name__} rows are append-only; bulk delete refused."
        )


class AppendOnlyModel(models.Model):
    """
    Base model for history records (teacher audit trail).
    A row can be inserted once and is never changed or removed afterwards.
    """
    objects = AppendOnlyQuerySet.as_manager()

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError(
                f"{self.__class__.__name__} records are append-only and cannot be updated."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError(
            f"{self.__class__.__name__} records are append-only and cannot be deleted."
        )
