#!/usr/bin/env python3
"""
Database migration runner.

Applies the SQL files in migrations/ to the Postgres database behind
Supabase, in filename order, recording each one in a tracking table.

Usage:
    python run_migrations.py            # Apply pending migrations
    python run_migrations.py --status   # Show migration status
    python run_migrations.py --dry-run  # Show what would run

Configuration:
    Set SUPABASE_DB_URL in your .env file (Supabase Dashboard → Settings →
    Database → Connection string → URI).
"""

import argparse
import hashlib
import sys
from dataclasses import dataclass
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


@dataclass(frozen=True)
class Migration:
    """A migration file on disk."""

    name: str
    path: Path
    checksum: str

    @classmethod
    def from_path(cls, path: Path) -> "Migration":
        content = path.read_text()
        return cls(path.name, path, hashlib.sha256(content.encode()).hexdigest()[:16])


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """All *.sql files in ``directory``, sorted by name."""
    if not directory.exists():
        return []
    return [Migration.from_path(path) for path in sorted(directory.glob("*.sql"))]


def pending_migrations(
    discovered: list[Migration],
    applied: dict[str, str],
) -> tuple[list[Migration], list[Migration]]:
    """
    Split discovered migrations against the applied name -> checksum map.

    Returns:
        (pending, changed): not yet applied, and applied but edited since
    """
    pending = [m for m in discovered if m.name not in applied]
    changed = [m for m in discovered if m.name in applied and applied[m.name] != m.checksum]
    return pending, changed


def connect():
    settings = get_settings()
    if not settings.supabase_db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)
    try:
        return psycopg2.connect(settings.supabase_db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                "CREATE TABLE IF NOT EXISTS {} ("
                "id SERIAL PRIMARY KEY, "
                "name VARCHAR(255) NOT NULL UNIQUE, "
                "checksum VARCHAR(64) NOT NULL, "
                "applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW())"
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def applied_migrations(conn) -> dict[str, str]:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {name: checksum for name, checksum in cur.fetchall()}


def apply(conn, migration: Migration) -> None:
    """Run one migration and record it, atomically."""
    console.print(f"[blue]Running:[/blue] {migration.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {migration.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {migration.name}")


def show_status(discovered: list[Migration], applied: dict[str, str]) -> None:
    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Checksum")

    pending, changed = pending_migrations(discovered, applied)
    for migration in discovered:
        if migration in pending:
            status = "[yellow]Pending[/yellow]"
        elif migration in changed:
            status = "[red]Changed[/red]"
        else:
            status = "[green]Applied[/green]"
        table.add_row(migration.name, status, migration.checksum)

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Run database migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status and exit")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations without running them")
    args = parser.parse_args()

    discovered = discover_migrations()
    conn = connect()
    try:
        ensure_migrations_table(conn)
        applied = applied_migrations(conn)

        if args.status:
            show_status(discovered, applied)
            return

        pending, changed = pending_migrations(discovered, applied)
        for migration in changed:
            console.print(f"[yellow]Warning:[/yellow] {migration.name} has changed since it was applied!")

        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return

        for migration in pending:
            if args.dry_run:
                console.print(f"[cyan]Would run:[/cyan] {migration.name}")
            else:
                apply(conn, migration)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
