"""
Read-only storage access for staff and patient records.

``RecordStore`` is the only place that builds querysets for the two
record tables.  Every method runs a single query (the join queries run
one inner join against ``staff``) and returns materialized results
ordered by primary key, so nothing lazy leaves the store.

String filters are exact and case-sensitive.  SQLite and PostgreSQL
compare that way natively; MySQL's default collations fold case, so on
that vendor the compared column is collated to ``utf8mb4_bin`` first.
"""
from __future__ import annotations

import datetime
import logging
from typing import Optional

from django.db import connections
from django.db.models import QuerySet
from django.db.models.functions import Collate

from records.models import Patient, Staff

logger = logging.getLogger(__name__)

BINARY_COLLATIONS = {
    'mysql': 'utf8mb4_bin',
}


class RecordStore:
    """Parametrized read queries over the ``staff`` and ``patient`` tables.

    ``using`` pins every query to one database alias.  When it is left
    as ``None`` the configured database routers pick the alias, which
    sends reads to the replica when one is configured.
    """

    def __init__(self, using: Optional[str] = None):
        self.using = using

    # -- helpers ------------------------------------------------------------

    def _staff(self) -> QuerySet:
        qs = Staff.objects.all()
        return qs.using(self.using) if self.using else qs

    def _patients(self) -> QuerySet:
        qs = Patient.objects.all()
        return qs.using(self.using) if self.using else qs

    def _exact(self, qs: QuerySet, lookup: str, value: str) -> QuerySet:
        collation = BINARY_COLLATIONS.get(connections[qs.db].vendor)
        if collation is None:
            return qs.filter(**{lookup: value})
        return qs.alias(_exact_match=Collate(lookup, collation)).filter(_exact_match=value)

    def _fetch(self, qs: QuerySet, label: str, *args) -> list:
        rows = list(qs.order_by('pk'))
        logger.debug("%s%r -> %d rows", label, args, len(rows))
        return rows

    # -- staff --------------------------------------------------------------

    def get_all_staff(self) -> list[Staff]:
        return self._fetch(self._staff(), 'get_all_staff')

    def get_staff_by_id(self, staff_id: int) -> Optional[Staff]:
        staff = self._staff().filter(pk=staff_id).first()
        logger.debug("get_staff_by_id(%s) -> %s", staff_id, 'hit' if staff else 'miss')
        return staff

    def get_staff_by_status(self, status: str) -> list[Staff]:
        return self._fetch(self._exact(self._staff(), 'status', status), 'get_staff_by_status', status)

    def get_staff_by_department(self, department: str) -> list[Staff]:
        qs = self._exact(self._staff(), 'department', department)
        return self._fetch(qs, 'get_staff_by_department', department)

    # -- patients -----------------------------------------------------------

    def get_all_patients(self) -> list[Patient]:
        return self._fetch(self._patients(), 'get_all_patients')

    def get_patient_by_id(self, patient_id: int) -> Optional[Patient]:
        patient = self._patients().filter(pk=patient_id).first()
        logger.debug("get_patient_by_id(%s) -> %s", patient_id, 'hit' if patient else 'miss')
        return patient

    def get_patients_by_dob_range(self, start: datetime.date, end: datetime.date) -> list[Patient]:
        """Patients born between ``start`` and ``end``, both bounds included."""
        qs = self._patients().filter(date_of_birth__gte=start, date_of_birth__lte=end)
        return self._fetch(qs, 'get_patients_by_dob_range', start, end)

    def get_patients_by_admitting_department(self, department: str) -> list[Patient]:
        """Patients whose admitting staff member works in ``department``.

        The filter spans the foreign key, which compiles to an inner join:
        patients with no admitting staff, or whose reference does not
        resolve to a staff row, never match.
        """
        qs = self._exact(self._patients(), 'admitted_by__department', department)
        return self._fetch(qs, 'get_patients_by_admitting_department', department)

    def get_patients_with_doctor_off(self) -> list[Patient]:
        """Patients whose admitting staff member is currently ``OFF``."""
        qs = self._exact(self._patients(), 'admitted_by__status', Staff.STATUS_OFF)
        return self._fetch(qs, 'get_patients_with_doctor_off')
