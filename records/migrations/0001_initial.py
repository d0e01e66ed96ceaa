import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Staff',
            fields=[
                ('id', models.BigIntegerField(primary_key=True, serialize=False)),
                ('department', models.CharField(db_index=True, max_length=255)),
                ('name', models.CharField(max_length=255)),
                ('status', models.CharField(db_index=True, max_length=32)),
            ],
            options={
                'db_table': 'staff',
                'ordering': ['id'],
                'verbose_name_plural': 'staff',
            },
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.BigIntegerField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('date_of_birth', models.DateField(db_index=True)),
                (
                    'admitted_by',
                    models.ForeignKey(
                        blank=True,
                        db_column='admitted_by',
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='admitted_patients',
                        to='records.staff',
                    ),
                ),
            ],
            options={
                'db_table': 'patient',
                'ordering': ['id'],
            },
        ),
    ]
