"""Seed a note storage file with realistic demo notes for screenshots.

Writes directly through ``NoteStore`` so the file has exactly the shape the
app reads back. Existing notes are kept unless ``--reset`` is given.

Usage:
    python scripts/seed_data.py [--path ~/.nebula/storage.json] [--reset]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running as a plain script from the project root.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from nebula.config import settings  # noqa: E402
from nebula.models import NoteUpdate  # noqa: E402
from nebula.storage import JsonFileKeyValueStore, NotePersistence  # noqa: E402
from nebula.store import NoteStore  # noqa: E402

logger = logging.getLogger("seed_data")

# Each entry: (title, content, favorite)
NOTES: list[tuple[str, str, bool]] = [
    (
        "Sector 7 Patrol Report",
        "Patrol drones swept sector 7 overnight. Two relay beacons offline near "
        "the eastern ridge, one showing intermittent power draw. Recommend a "
        "maintenance crew at first light.",
        True,
    ),
    (
        "Reading List",
        "Papers to read: Attention Is All You Need, ReAct: Synergizing Reasoning "
        "and Acting, Toolformer: Language Models Can Teach Themselves to Use Tools.",
        False,
    ),
    (
        "Meeting Notes",
        "Discussed migrating the monolith to microservices. Key decision: use "
        "event-driven architecture for inter-service communication.",
        False,
    ),
    (
        "",
        "teh quick brown fox jumpd over the lazy dog and then it was runing away "
        "from the hunter who were chasing it",
        False,
    ),
    (
        "Project Ideas",
        "Build a note app that rewrites logs as transmissions from a deep-space "
        "freighter. Add a tactical summary button.",
        True,
    ),
]


def main() -> None:
    """Create every seed note in order."""
    parser = argparse.ArgumentParser(description="Seed demo notes")
    parser.add_argument(
        "--path",
        type=Path,
        default=settings.notes_storage_path,
        help=f"Storage file (default: {settings.notes_storage_path})",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Discard existing notes before seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    kv = JsonFileKeyValueStore(args.path)
    persistence = NotePersistence(kv, key=settings.notes_storage_key)
    if args.reset:
        persistence.save([])
    store = NoteStore(persistence, seed_welcome=False)

    print(f"\n  Seeding notes into {kv.path} (key {persistence.key!r})")
    print("  " + "=" * 58)

    for i, (title, content, favorite) in enumerate(NOTES, 1):
        note_id = store.create(title=title, content=content)
        if favorite:
            store.update(note_id, NoteUpdate(is_favorite=True))
        print(f"  [{i}/{len(NOTES)}] {title or '(untitled)'}")

    print("  " + "=" * 58)
    print(f"  Done! {store.count} notes stored.")
    print("  Start the app with: streamlit run ui/app.py")
    print()


if __name__ == "__main__":
    main()
