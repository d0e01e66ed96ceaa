#!/usr/bin/env python
"""
Command-line entry point for the hospital record query service.  It sets the
default settings module to ``hospital_query.settings`` and then delegates to
Django's management command line utility (``migrate``, ``runserver``,
``seed_records`` and friends).
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the Django project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hospital_query.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
