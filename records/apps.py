from django.apps import AppConfig


class RecordsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'records'
    verbose_name = 'Hospital records'

    def ready(self) -> None:
        # Build the storage client and the query service once per process;
        # the views resolve it through ``get_query_service``.
        from records.services.query import QueryService
        from records.services.store import RecordStore

        self.query_service = QueryService(RecordStore())
