import datetime
from io import StringIO
from types import SimpleNamespace

import pytest
from django.core.management import call_command
from rest_framework.test import APIClient

from records.db_routers import ReadReplicaRouter
from records.exceptions import api_exception_handler
from records.models import Patient, Staff
from records.services import get_query_service

pytestmark = pytest.mark.django_db


def test_healthz_reports_database():
    client = APIClient()
    r = client.get('/healthz')
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': {'default': True}}


def test_seed_records_is_idempotent():
    out = StringIO()
    call_command('seed_records', stdout=out)
    call_command('seed_records', stdout=out)
    assert 'Seeded 6 staff and 8 patients.' in out.getvalue()
    assert Staff.objects.count() == 6
    assert Patient.objects.count() == 8


def test_seed_records_clear_reloads_data():
    Staff.objects.create(id=99, name='Temp', department='Radiology', status='ON')
    call_command('seed_records', '--clear', stdout=StringIO())
    assert not Staff.objects.filter(id=99).exists()
    assert Staff.objects.count() == 6


def test_seeded_data_answers_reference_scenarios():
    call_command('seed_records', stdout=StringIO())
    service = get_query_service()
    off = [p.id for p in service.get_patients_with_doctor_off()]
    assert 10 in off and 11 not in off
    assert 10 in [p.id for p in service.get_patients_by_admitting_department('Cardiology')]
    in_1990 = [p.id for p in service.get_patients_by_dob_range('1990-01-01', '1990-12-31')]
    assert {11, 16, 17} <= set(in_1990)
    assert 12 not in in_1990
    assert service.get_patient_by_id('11').date_of_birth == datetime.date(1990, 6, 15)


def test_replica_router_without_replica_reads_default():
    router = ReadReplicaRouter()
    assert router.db_for_read(Staff) == 'default'
    assert router.db_for_write(Staff) == 'default'
    assert router.allow_migrate('default', 'records')
    assert not router.allow_migrate('replica', 'records')


def test_replica_router_prefers_replica_when_configured(monkeypatch):
    fake_settings = SimpleNamespace(DATABASES={'default': {}, 'replica': {}})
    monkeypatch.setattr('records.db_routers.settings', fake_settings)
    assert ReadReplicaRouter().db_for_read(Patient) == 'replica'


def test_exception_handler_wraps_unexpected_errors():
    resp = api_exception_handler(RuntimeError('boom'), {'request': None})
    assert resp.status_code == 500
    assert resp.data == {'ok': False, 'error': {'code': 'server_error', 'message': 'boom'}}
