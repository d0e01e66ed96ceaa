from __future__ import annotations

import datetime
import re
from typing import Optional, Union

from rest_framework.exceptions import ValidationError

from records.models import Patient, Staff
from records.services.store import RecordStore

ISO_DATE_RE = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)
RECORD_ID_RE = re.compile(r'-?\d+', re.ASCII)

# Primary keys are BIGINT columns
MIN_RECORD_ID = -2 ** 63
MAX_RECORD_ID = 2 ** 63 - 1

IdLike = Union[int, str]
DateLike = Union[datetime.date, str, None]


def parse_record_id(value: IdLike, *, field: str = 'id') -> int:
    """Parse a path id into an int or raise a 400-level ``ValidationError``."""
    if isinstance(value, bool):
        raise ValidationError({field: ['A valid integer is required.']})
    if isinstance(value, int):
        record_id = value
    else:
        text = str(value).strip()
        if not RECORD_ID_RE.fullmatch(text):
            raise ValidationError({field: ['A valid integer is required.']})
        record_id = int(text)
    if not MIN_RECORD_ID <= record_id <= MAX_RECORD_ID:
        raise ValidationError({field: ['Id is out of range.']})
    return record_id


def parse_iso_date(value: DateLike, *, field: str) -> datetime.date:
    """Parse ``YYYY-MM-DD`` text into a calendar date.

    Missing, malformed and impossible dates (``2021-02-30``) are all
    caller errors.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    text = (value or '').strip()
    if not text:
        raise ValidationError({field: ['This parameter is required.']})
    if not ISO_DATE_RE.fullmatch(text):
        raise ValidationError({field: [f'Date has wrong format: {text!r}. Use YYYY-MM-DD.']})
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        raise ValidationError({field: [f'Not a valid calendar date: {text!r}.']})


class QueryService:
    """The nine record lookups exposed over HTTP.

    Each method forwards to the store and returns its result unchanged.
    Text inputs (ids from the path, dates from the query string) are
    parsed here so that malformed input never reaches the database.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def get_all_staff(self) -> list[Staff]:
        return self.store.get_all_staff()

    def get_staff_by_id(self, staff_id: IdLike) -> Optional[Staff]:
        return self.store.get_staff_by_id(parse_record_id(staff_id, field='employeeId'))

    def get_staff_by_status(self, status: str) -> list[Staff]:
        return self.store.get_staff_by_status(status)

    def get_staff_by_department(self, department: str) -> list[Staff]:
        return self.store.get_staff_by_department(department)

    def get_all_patients(self) -> list[Patient]:
        return self.store.get_all_patients()

    def get_patient_by_id(self, patient_id: IdLike) -> Optional[Patient]:
        return self.store.get_patient_by_id(parse_record_id(patient_id, field='patientId'))

    def get_patients_by_dob_range(self, start: DateLike, end: DateLike) -> list[Patient]:
        start_date = parse_iso_date(start, field='startDate')
        end_date = parse_iso_date(end, field='endDate')
        return self.store.get_patients_by_dob_range(start_date, end_date)

    def get_patients_by_admitting_department(self, department: str) -> list[Patient]:
        return self.store.get_patients_by_admitting_department(department)

    def get_patients_with_doctor_off(self) -> list[Patient]:
        return self.store.get_patients_with_doctor_off()
