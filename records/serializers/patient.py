from rest_framework import serializers

from records.models import Patient


class PatientSerializer(serializers.ModelSerializer):
    """Patient record; ``admittedBy`` is the admitting staff id or ``null``."""
    dateOfBirth = serializers.DateField(source='date_of_birth', read_only=True)
    admittedBy = serializers.PrimaryKeyRelatedField(source='admitted_by', read_only=True)

    class Meta:
        model = Patient
        fields = ['id', 'name', 'dateOfBirth', 'admittedBy']


class DobRangeQuerySerializer(serializers.Serializer):
    # Kept as text; QueryService owns the date parsing
    startDate = serializers.CharField()
    endDate = serializers.CharField()
