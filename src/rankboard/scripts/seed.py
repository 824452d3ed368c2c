"""Load a handful of demo people into the configured database."""
from __future__ import annotations

import argparse

from rankboard.db.session import SessionLocal, create_tables
from rankboard.models import Person
from rankboard.repositories import SqlStorage, Storage
from rankboard.services.subjects import create_subject

DEMO_PEOPLE: list[dict[str, str]] = [
    {
        "name": "Dr. Layla Haddad",
        "description": "Teaches introductory algorithms; famous for surprise quizzes.",
        "category": "teacher",
    },
    {
        "name": "Omar Nasser",
        "description": "Final-year student and captain of the chess club.",
        "category": "student",
    },
    {
        "name": "Sara Khalil",
        "description": "Runs the registrar's front desk.",
        "category": "employee",
    },
    {
        "name": "Rami Azar",
        "description": "Local radio host.",
        "category": "celebrity",
    },
]


def _avatar_url(name: str) -> str:
    return f"https://ui-avatars.com/api/?name={name.replace(' ', '+')}"


def seed(storage: Storage) -> list[Person]:
    """Create every demo person that is not already present by name."""
    existing = {p.name for p in storage.list_people()}
    created = []
    for entry in DEMO_PEOPLE:
        if entry["name"] in existing:
            continue
        created.append(
            create_subject(
                storage,
                name=entry["name"],
                description=entry["description"],
                category=entry["category"],
                image_url=_avatar_url(entry["name"]),
            )
        )
    return created


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo people")
    parser.parse_args()

    create_tables()
    with SessionLocal() as session:
        created = seed(SqlStorage(session))
    print(f"[seed] created {len(created)} people")


if __name__ == "__main__":
    main()
