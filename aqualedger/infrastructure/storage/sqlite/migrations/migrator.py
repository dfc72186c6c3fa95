"""
Versioned schema migrator for the ledger database.

Migrations are ``vNNN_name.sql`` files next to this module, applied in
version order and recorded in ``schema_migrations`` with a checksum.
A migration whose file changed after it was applied is reported and
stops the run.
"""

import asyncio
import hashlib
import re
import shutil
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import aiosqlite

from aqualedger.config import get_logger, get_settings

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent

REQUIRED_TABLES = ("ledger_records", "ledger_id_counters", "schema_migrations")


@dataclass
class MigrationInfo:
    """A migration file on disk."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def from_file(cls, path: Path) -> "MigrationInfo":
        match = re.match(r"v(\d+)_(.+)\.sql", path.name)
        if not match:
            raise ValueError(f"Invalid migration filename: {path.name}")

        content = path.read_text(encoding="utf-8")
        return cls(
            version=match.group(1),
            name=match.group(2),
            path=path,
            checksum=hashlib.sha256(content.encode()).hexdigest()[:16],
        )


@dataclass
class MigrationResult:
    version: str
    name: str
    success: bool
    execution_time_ms: int
    error: str | None = None


async def get_applied_migrations(conn: aiosqlite.Connection) -> dict[str, str]:
    """Applied migration versions mapped to their checksums."""
    try:
        cursor = await conn.execute(
            "SELECT version, checksum FROM schema_migrations ORDER BY version"
        )
        rows = await cursor.fetchall()
        return {row[0]: row[1] for row in rows}
    except aiosqlite.OperationalError:
        # Fresh database
        return {}


def discover_migrations() -> list[MigrationInfo]:
    migrations = []
    for path in sorted(MIGRATIONS_DIR.glob("v*.sql")):
        try:
            migrations.append(MigrationInfo.from_file(path))
        except ValueError as e:
            logger.warning("skipping_invalid_migration", path=str(path), error=str(e))
    return migrations


async def apply_migration(
    conn: aiosqlite.Connection,
    migration: MigrationInfo,
) -> MigrationResult:
    """Run one migration script and record it."""
    logger.info("applying_migration", version=migration.version, name=migration.name)
    start_time = time.time()

    try:
        await conn.executescript(migration.path.read_text(encoding="utf-8"))
        await conn.execute(
            """
            INSERT OR REPLACE INTO schema_migrations (version, name, checksum, execution_time_ms)
            VALUES (?, ?, ?, ?)
            """,
            (
                migration.version,
                migration.name,
                migration.checksum,
                int((time.time() - start_time) * 1000),
            ),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        execution_time = int((time.time() - start_time) * 1000)
        logger.error(
            "migration_failed",
            version=migration.version,
            name=migration.name,
            error=str(e),
        )
        return MigrationResult(
            version=migration.version,
            name=migration.name,
            success=False,
            execution_time_ms=execution_time,
            error=str(e),
        )

    execution_time = int((time.time() - start_time) * 1000)
    logger.info(
        "migration_applied",
        version=migration.version,
        name=migration.name,
        execution_time_ms=execution_time,
    )
    return MigrationResult(
        version=migration.version,
        name=migration.name,
        success=True,
        execution_time_ms=execution_time,
    )


def create_backup(db_path: Path) -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = db_path.with_suffix(f".backup_{timestamp}.db")
    shutil.copy2(db_path, backup_path)
    logger.info("database_backup_created", backup_path=str(backup_path))
    return backup_path


def restore_backup(db_path: Path, backup_path: Path) -> None:
    shutil.copy2(backup_path, db_path)
    logger.info("database_restored_from_backup", backup_path=str(backup_path))


async def initialize_database(
    db_path: Path | None = None,
    create_backup_before: bool = True,
) -> list[MigrationResult]:
    """
    Bring the ledger database up to the latest schema.

    Args:
        db_path: Path to database file (default from settings)
        create_backup_before: Copy an existing database aside first

    Returns:
        Results for the migrations that were run
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info("initializing_database", db_path=str(db_path))

    backup_path = None
    if create_backup_before and db_path.exists():
        backup_path = create_backup(db_path)

    results: list[MigrationResult] = []

    try:
        async with aiosqlite.connect(db_path) as conn:
            await conn.execute("PRAGMA journal_mode=WAL")

            applied = await get_applied_migrations(conn)
            for migration in discover_migrations():
                if migration.version in applied:
                    if applied[migration.version] != migration.checksum:
                        logger.error(
                            "migration_checksum_changed",
                            version=migration.version,
                        )
                        break
                    continue

                result = await apply_migration(conn, migration)
                results.append(result)
                if not result.success:
                    break

        if backup_path and all(r.success for r in results):
            backup_path.unlink()
            logger.info("backup_cleaned_up")

    except Exception as e:
        logger.error("database_initialization_failed", error=str(e))
        if backup_path and backup_path.exists():
            restore_backup(db_path, backup_path)
        raise

    return results


# Alias used by the API lifespan
run_migrations = initialize_database


async def get_migration_status(db_path: Path | None = None) -> dict:
    """Current, applied and pending migration versions."""
    db_path = db_path or get_settings().storage.db_path

    if not db_path.exists():
        return {
            "exists": False,
            "current_version": None,
            "applied_migrations": [],
            "pending_migrations": [],
        }

    async with aiosqlite.connect(db_path) as conn:
        applied = await get_applied_migrations(conn)
        discovered = discover_migrations()
        versions = sorted(applied)

        return {
            "exists": True,
            "current_version": versions[-1] if versions else None,
            "applied_migrations": versions,
            "pending_migrations": [m.version for m in discovered if m.version not in applied],
        }


async def verify_schema_integrity(db_path: Path | None = None) -> list[dict]:
    db_path = db_path or get_settings().storage.db_path
    checks = []

    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("PRAGMA integrity_check")
        integrity = await cursor.fetchone()
        checks.append({
            "check": "integrity",
            "status": "PASS" if integrity[0] == "ok" else "FAIL",
            "result": integrity[0],
        })

        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        existing = {row[0] for row in await cursor.fetchall()}
        missing = [t for t in REQUIRED_TABLES if t not in existing]
        checks.append({
            "check": "required_tables",
            "status": "PASS" if not missing else "FAIL",
            "missing": missing,
        })

    return checks


def main() -> None:
    """CLI entry point for database migration."""
    import argparse

    parser = argparse.ArgumentParser(description="AquaLedger database migrator")
    parser.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    parser.add_argument("--status", action="store_true", help="Show migration status")
    parser.add_argument("--verify", action="store_true", help="Verify schema integrity")
    parser.add_argument("--no-backup", action="store_true", help="Skip backup before migrations")
    args = parser.parse_args()

    async def run():
        if args.status:
            status = await get_migration_status(args.db_path)
            print(f"Database exists: {status['exists']}")
            print(f"Current version: {status.get('current_version') or 'N/A'}")
            print(f"Applied migrations: {status['applied_migrations']}")
            print(f"Pending migrations: {status['pending_migrations']}")

        elif args.verify:
            for check in await verify_schema_integrity(args.db_path):
                print(f"[{check['status']}] {check['check']}")
                if check["status"] != "PASS":
                    for key, value in check.items():
                        if key not in ("check", "status"):
                            print(f"       {key}: {value}")

        else:
            results = await initialize_database(
                args.db_path,
                create_backup_before=not args.no_backup,
            )
            for result in results:
                status = "SUCCESS" if result.success else "FAILED"
                print(f"[{status}] v{result.version}: {result.name} ({result.execution_time_ms}ms)")
                if result.error:
                    print(f"         Error: {result.error}")

    asyncio.run(run())


if __name__ == "__main__":
    main()
