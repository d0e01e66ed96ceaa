from rest_framework import serializers

from records.models import Staff


class StaffSerializer(serializers.ModelSerializer):
    class Meta:
        model = Staff
        fields = ['id', 'department', 'name', 'status']
        read_only_fields = fields
