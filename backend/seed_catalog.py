"""Load the development exercise and RPE catalog into the configured database.

Run: cd backend && python seed_catalog.py [path/to/catalog.json]
Safe to re-run: rows are matched by exercise slug and RPE value.
"""
import json
import logging
import sys
from pathlib import Path

from app.db import SessionLocal
from app.repositories.catalog_repo import ExerciseRepository, RPERepository
from app.services import transaction

log = logging.getLogger("uvicorn")

#config
catalog_json = Path(__file__).resolve().parent.parent / "data" / "catalog" / "catalog.json"


def load_catalog(path: Path) -> dict:
    data = json.loads(path.read_text())
    if not data.get("exercises"):
        raise ValueError(f"{path} lists no exercises")
    return data


def seed(db, data: dict) -> dict:
    """Upsert exercises and RPE values; returns inserted/updated counts."""
    exercises = ExerciseRepository(db)
    rpe = RPERepository(db)
    counts = {"exercises_inserted": 0, "exercises_updated": 0, "rpe_inserted": 0, "rpe_updated": 0}

    with transaction(db):
        for ex in data.get("exercises", []):
            row = exercises.get_by_slug(ex["slug"])
            if row is None:
                exercises.create(slug=ex["slug"], name=ex["name"], description=ex.get("description"))
                counts["exercises_inserted"] += 1
            elif (row.name, row.description) != (ex["name"], ex.get("description")):
                row.name = ex["name"]
                row.description = ex.get("description")
                counts["exercises_updated"] += 1

        for item in data.get("rpe_values", []):
            row = rpe.get_by_value(item["value"])
            if row is None:
                rpe.create(value=item["value"], label=item["label"], description=item.get("description"))
                counts["rpe_inserted"] += 1
            elif (row.label, row.description) != (item["label"], item.get("description")):
                row.label = item["label"]
                row.description = item.get("description")
                counts["rpe_updated"] += 1
        db.flush()

    log.info("catalog seeded: %s", counts)
    return counts


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else catalog_json
    data = load_catalog(path)
    with SessionLocal() as db:
        counts = seed(db, data)
    print(f"Seeded catalog from {path}: {counts}")


if __name__ == "__main__":
    main()
