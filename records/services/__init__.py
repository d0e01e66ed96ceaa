from django.apps import apps

from records.services.query import QueryService


def get_query_service() -> QueryService:
    """Return the query service built when the ``records`` app became ready."""
    return apps.get_app_config('records').query_service
