"""
Management command to load a small demo set of staff and patient records.

The command is idempotent: rows are matched on their primary key and
updated in place, so running it twice leaves the same data behind.
"""
from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from records.models import Patient, Staff

STAFF = [
    (1, 'Cardiology', 'Dr. Amelia Hart', Staff.STATUS_OFF),
    (2, 'Cardiology', 'Dr. Bruno Costa', Staff.STATUS_ON),
    (3, 'Neurology', 'Dr. Chen Wei', Staff.STATUS_ON),
    (4, 'Neurology', 'Dr. Dana Ortiz', Staff.STATUS_OFF),
    (5, 'Pediatrics', 'Dr. Emeka Obi', Staff.STATUS_ON),
    (6, 'Emergency', 'Dr. Farah Aziz', Staff.STATUS_ON),
]

# (id, name, date of birth, admitting staff id or None)
PATIENTS = [
    (10, 'Grace Miller', date(2000, 1, 1), 1),
    (11, 'Hiro Tanaka', date(1990, 6, 15), None),
    (12, 'Ines Duarte', date(1991, 1, 1), 2),
    (13, 'Jonas Berg', date(1985, 3, 22), 3),
    (14, 'Kira Novak', date(2012, 9, 30), 5),
    (15, 'Liam Walsh', date(1978, 12, 5), 4),
    (16, 'Mina Sato', date(1990, 1, 1), 6),
    (17, 'Noah Fischer', date(1990, 12, 31), None),
]


class Command(BaseCommand):
    help = 'Load demo staff and patient records (idempotent).'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all existing staff and patient records first.',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = Patient.objects.all().delete()
            self.stdout.write(f'Removed {deleted} patient rows')
            deleted, _ = Staff.objects.all().delete()
            self.stdout.write(f'Removed {deleted} staff rows')

        staff = self.create_staff()
        patients = self.create_patients()
        self.stdout.write(self.style.SUCCESS(
            f'Seeded {len(staff)} staff and {len(patients)} patients.'
        ))

    def create_staff(self):
        rows = []
        for staff_id, department, name, status in STAFF:
            staff, created = Staff.objects.update_or_create(
                id=staff_id,
                defaults={'department': department, 'name': name, 'status': status},
            )
            rows.append(staff)
            self.stdout.write(f"{'created' if created else 'updated'} staff: {staff}")
        return rows

    def create_patients(self):
        rows = []
        for patient_id, name, dob, admitted_by in PATIENTS:
            patient, created = Patient.objects.update_or_create(
                id=patient_id,
                defaults={'name': name, 'date_of_birth': dob, 'admitted_by_id': admitted_by},
            )
            rows.append(patient)
            self.stdout.write(f"{'created' if created else 'updated'} patient: {patient}")
        return rows
