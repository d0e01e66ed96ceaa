"""
Django admin registrations for the record models.

The admin site is the data-entry path for staff and patient records;
the public API never writes.
"""
from django.contrib import admin

from .models import Patient, Staff


@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'department', 'status')
    list_filter = ('status', 'department')
    search_fields = ('id', 'name', 'department')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'date_of_birth', 'admitted_by')
    list_filter = ('admitted_by__department',)
    search_fields = ('id', 'name')
    date_hierarchy = 'date_of_birth'
    raw_id_fields = ('admitted_by',)
