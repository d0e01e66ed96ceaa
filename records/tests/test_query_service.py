import datetime

import pytest
from rest_framework.exceptions import ValidationError

from records.services import get_query_service
from records.services.query import QueryService, parse_iso_date, parse_record_id
from records.services.store import RecordStore


class RecordingStore:
    """Stands in for ``RecordStore`` and remembers every call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def method(*args):
            self.calls.append((name, args))
            return [name]
        return method


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def service(store):
    return QueryService(store)


def test_operations_forward_unchanged(service, store):
    assert service.get_all_staff() == ['get_all_staff']
    assert service.get_staff_by_status('OFF') == ['get_staff_by_status']
    assert service.get_staff_by_department('Cardiology') == ['get_staff_by_department']
    assert service.get_all_patients() == ['get_all_patients']
    assert service.get_patients_by_admitting_department('Neurology') == ['get_patients_by_admitting_department']
    assert service.get_patients_with_doctor_off() == ['get_patients_with_doctor_off']
    assert store.calls == [
        ('get_all_staff', ()),
        ('get_staff_by_status', ('OFF',)),
        ('get_staff_by_department', ('Cardiology',)),
        ('get_all_patients', ()),
        ('get_patients_by_admitting_department', ('Neurology',)),
        ('get_patients_with_doctor_off', ()),
    ]


def test_ids_are_parsed_from_text(service, store):
    service.get_staff_by_id('7')
    service.get_patient_by_id(10)
    assert store.calls == [('get_staff_by_id', (7,)), ('get_patient_by_id', (10,))]


@pytest.mark.parametrize('raw', [
    'abc', '1.5', '', '12x', '1_0', '+5', '\u0663', '99999999999999999999', '-9223372036854775809',
])
def test_malformed_id_never_reaches_store(service, store, raw):
    with pytest.raises(ValidationError):
        service.get_staff_by_id(raw)
    with pytest.raises(ValidationError):
        service.get_patient_by_id(raw)
    assert store.calls == []


def test_dob_range_text_is_parsed_into_dates(service, store):
    service.get_patients_by_dob_range('1990-01-01', '1990-12-31')
    assert store.calls == [
        ('get_patients_by_dob_range', (datetime.date(1990, 1, 1), datetime.date(1990, 12, 31))),
    ]


@pytest.mark.parametrize('start,end', [
    ('not-a-date', '1990-12-31'),
    ('1990-01-01', '31/12/1990'),
    ('1990-02-30', '1990-12-31'),
    ('1990-1-1', '1990-12-31'),
    ('', '1990-12-31'),
    ('1990-01-01', None),
])
def test_bad_dates_are_caller_errors(service, store, start, end):
    with pytest.raises(ValidationError):
        service.get_patients_by_dob_range(start, end)
    assert store.calls == []


def test_parse_helpers_accept_native_values():
    assert parse_record_id(5) == 5
    assert parse_record_id(' 42 ') == 42
    day = datetime.date(2000, 1, 1)
    assert parse_iso_date(day, field='startDate') is day
    assert parse_iso_date(datetime.datetime(2000, 1, 1, 8, 30), field='startDate') == day


def test_parse_record_id_rejects_booleans():
    with pytest.raises(ValidationError):
        parse_record_id(True)


def test_parse_record_id_bounds_match_bigint_columns():
    assert parse_record_id('9223372036854775807') == 2 ** 63 - 1
    assert parse_record_id('-9223372036854775808') == -2 ** 63
    assert parse_record_id('-3') == -3
    with pytest.raises(ValidationError):
        parse_record_id(2 ** 63)


def test_app_builds_query_service_over_record_store():
    service = get_query_service()
    assert isinstance(service, QueryService)
    assert isinstance(service.store, RecordStore)
    assert service.store.using is None
