"""Database migrations module."""

from aqualedger.infrastructure.storage.sqlite.migrations.migrator import (
    MigrationInfo,
    MigrationResult,
    create_backup,
    discover_migrations,
    get_migration_status,
    initialize_database,
    restore_backup,
    run_migrations,
    verify_schema_integrity,
)

__all__ = [
    "MigrationInfo",
    "MigrationResult",
    "create_backup",
    "discover_migrations",
    "get_migration_status",
    "initialize_database",
    "restore_backup",
    "run_migrations",
    "verify_schema_integrity",
]
