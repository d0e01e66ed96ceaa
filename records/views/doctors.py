"""
Staff (doctor) lookup views.

Thin wrappers: each view reads its path parameter, calls exactly one
``QueryService`` operation and serializes the result.  A lookup by id
that finds nothing answers ``200`` with an empty body.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from records.serializers.staff import StaffSerializer
from records.services import get_query_service


@api_view(['GET'])
@permission_classes([AllowAny])
def list_doctors(request):
    staff = get_query_service().get_all_staff()
    return Response(StaffSerializer(staff, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def doctor_detail(request, employee_id):
    staff = get_query_service().get_staff_by_id(employee_id)
    return Response(StaffSerializer(staff).data if staff else None)


@api_view(['GET'])
@permission_classes([AllowAny])
def doctors_by_status(request, status):
    staff = get_query_service().get_staff_by_status(status)
    return Response(StaffSerializer(staff, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def doctors_by_department(request, department):
    staff = get_query_service().get_staff_by_department(department)
    return Response(StaffSerializer(staff, many=True).data)
