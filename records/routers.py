"""
URL mappings for the record query API.

Mounted under ``/api`` by the project URLconf.  Ids are captured as
text and parsed by the query service so that a non-numeric id is a
``400`` instead of an unmatched route.  Department names may contain
``/`` and are captured whole.  Trailing slashes are omitted.
"""
from django.urls import path

from .views import doctors, patients


urlpatterns = [
    # Staff
    path('doctors', doctors.list_doctors, name='doctor-list'),
    path('doctor/<str:employee_id>', doctors.doctor_detail, name='doctor-detail'),
    path('doctors/status/<str:status>', doctors.doctors_by_status, name='doctors-by-status'),
    path('doctors/department/<path:department>', doctors.doctors_by_department, name='doctors-by-department'),
    # Patients
    path('patients', patients.list_patients, name='patient-list'),
    path('patient/<str:patient_id>', patients.patient_detail, name='patient-detail'),
    path('patients/dob_range', patients.patients_by_dob_range, name='patients-by-dob-range'),
    path('patients/department/<path:department>', patients.patients_by_department, name='patients-by-department'),
    path('patients/doctor_status_off', patients.patients_with_doctor_off, name='patients-doctor-off'),
]
