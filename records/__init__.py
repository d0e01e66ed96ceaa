"""Staff and patient records for the hospital query service.

This app owns the two record tables, the read-only store that queries
them, the query service built on top of the store and the HTTP views
that expose it.
"""
