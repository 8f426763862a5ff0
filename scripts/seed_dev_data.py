"""Seed dev data from scripts/seed-data.json into the database.

Creates tracked entities (skipped when the id already exists) and their
document metadata, so checklist progress and status transitions can be
tried against the API right away.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: DATABASE_URL and a migrated DB (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from app.application.dtos.document import StoredDocument
from app.core.config import get_settings
from app.infrastructure.persistence import database as db_mod
from app.infrastructure.persistence.repositories import (
    DocumentRepository,
    EntityRepository,
)
from app.shared.utils import utc_now


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)

    db_mod._ensure_engine()
    if db_mod.AsyncSessionLocal is None:
        print(
            "Database not configured. Set DATABASE_URL and run: alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            entity_repo = EntityRepository(session)
            document_repo = DocumentRepository(session)
            for e in data.get("entities", []):
                existing = await entity_repo.get_by_id(e["entity_type"], e["id"])
                if existing:
                    print(f"  Skip {e['entity_type']}/{e['id']} (exists)")
                    continue
                entity = await entity_repo.create(
                    e["entity_type"],
                    e["status"],
                    e.get("attributes", {}),
                    entity_id=e["id"],
                )
                # Older uploads first so created_at order matches the file.
                base_time = utc_now() - timedelta(minutes=len(e.get("documents", [])))
                for i, d in enumerate(e.get("documents", [])):
                    await document_repo.add(
                        StoredDocument(
                            entity_type=entity.entity_type,
                            entity_id=entity.id,
                            document_type=d["document_type"],
                            version=d.get("version", 1),
                            was_reviewed=d.get("was_reviewed", False),
                            created_at=base_time + timedelta(minutes=i),
                        )
                    )
                print(
                    f"  {entity.entity_type}/{entity.id} ({entity.status}) "
                    f"with {len(e.get('documents', []))} documents"
                )

    await db_mod.dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
