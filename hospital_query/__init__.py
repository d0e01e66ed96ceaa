"""Django project package for the hospital record query service."""
