"""
Database models for the hospital record query service.

Two record types are stored: hospital staff members and admitted
patients.  A patient optionally references the staff member who
admitted them.  Both tables are written by external data-entry paths
(the admin site, the ``seed_records`` command); the query layer only
reads them.
"""
from __future__ import annotations

from django.db import models


class Staff(models.Model):
    """A hospital staff member (doctor).

    ``status`` carries the duty status.  ``ON`` and ``OFF`` are the
    values the queries filter on, but other values are stored as-is.
    """
    STATUS_ON = 'ON'
    STATUS_OFF = 'OFF'

    # Ids are assigned by the upstream staff registry, never generated here
    id = models.BigIntegerField(primary_key=True)
    department = models.CharField(max_length=255, db_index=True)
    name = models.CharField(max_length=255)
    status = models.CharField(max_length=32, db_index=True)

    class Meta:
        db_table = 'staff'
        ordering = ['id']
        verbose_name_plural = 'staff'

    def __str__(self) -> str:
        return f"{self.name} ({self.department}, {self.status})"


class Patient(models.Model):
    """An admitted patient, optionally linked to the admitting staff member."""
    id = models.BigIntegerField(primary_key=True)
    name = models.CharField(max_length=255)
    date_of_birth = models.DateField(db_index=True)
    # Foreign keys are indexed; the index backs the department and status joins
    admitted_by = models.ForeignKey(
        Staff,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        db_column='admitted_by',
        related_name='admitted_patients',
    )

    class Meta:
        db_table = 'patient'
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.name} ({self.date_of_birth.isoformat()})"
