"""
Patient lookup views.

Besides the plain lookups this module exposes the date-of-birth range
filter (``startDate``/``endDate`` query parameters, ``YYYY-MM-DD``) and
the two queries that join patients to their admitting staff member.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from records.serializers.patient import DobRangeQuerySerializer, PatientSerializer
from records.services import get_query_service


@api_view(['GET'])
@permission_classes([AllowAny])
def list_patients(request):
    patients = get_query_service().get_all_patients()
    return Response(PatientSerializer(patients, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def patient_detail(request, patient_id):
    patient = get_query_service().get_patient_by_id(patient_id)
    return Response(PatientSerializer(patient).data if patient else None)


@api_view(['GET'])
@permission_classes([AllowAny])
def patients_by_dob_range(request):
    q = DobRangeQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    patients = get_query_service().get_patients_by_dob_range(
        q.validated_data['startDate'], q.validated_data['endDate']
    )
    return Response(PatientSerializer(patients, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def patients_by_department(request, department):
    """Patients admitted by a staff member of ``department``."""
    patients = get_query_service().get_patients_by_admitting_department(department)
    return Response(PatientSerializer(patients, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def patients_with_doctor_off(request):
    """Patients whose admitting staff member is off duty."""
    patients = get_query_service().get_patients_with_doctor_off()
    return Response(PatientSerializer(patients, many=True).data)
