"""
Database router that serves reads from the ``replica`` alias.

Installed only when ``DB_REPLICA_URL`` is set.  Writes (admin data
entry, ``seed_records``) and migrations always go to ``default``.
"""
from __future__ import annotations

from django.conf import settings

REPLICA_ALIAS = 'replica'


class ReadReplicaRouter:

    def db_for_read(self, model, **hints):
        if REPLICA_ALIAS in settings.DATABASES:
            return REPLICA_ALIAS
        return 'default'

    def db_for_write(self, model, **hints):
        return 'default'

    def allow_relation(self, obj1, obj2, **hints):
        # Both aliases hold the same data set
        return True

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        return db == 'default'
