"""
Persistence adapters.

json_storage handles the per-character JSON documents and catalog_repository
the read-only SQLite catalog. Services should depend on these modules rather
than touching files or connections directly.
"""
