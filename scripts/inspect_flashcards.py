"""Quick DB inspector for catalog and flashcards data.

Prints row counts, per-type answer accuracy and a few recent flashcards to
sanity-check a database after generation runs.

Usage:
  uv run scripts/inspect_flashcards.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Ensure project root is on sys.path so `app` package imports resolve
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sqlalchemy import case, select, func

from app.core.db.base import get_session
from app.core.db.schemas.catalog import DataType, Instance, PropertyValue
from app.core.db.schemas.flashcards import Answer, Flashcard


async def main() -> int:
    async for session in get_session():  # get_session is an async generator
        counts = {}
        for label, model in (
            ("Data types", DataType),
            ("Instances", Instance),
            ("Property values", PropertyValue),
            ("Flashcards", Flashcard),
            ("Answers", Answer),
        ):
            counts[label] = (
                await session.execute(select(func.count(model.id)))
            ).scalar() or 0

        print("Flashcards DB summary:")
        for label, count in counts.items():
            print(f"- {label}: {count}")

        accuracy_q = (
            select(
                Flashcard.flashcard_type,
                func.count(Answer.id),
                func.sum(case((Answer.is_correct, 1), else_=0)),
            )
            .join(Answer, Answer.flashcard_id == Flashcard.id)
            .group_by(Flashcard.flashcard_type)
        )
        rows = (await session.execute(accuracy_q)).all()
        if rows:
            print("\nAnswer accuracy by card type:")
            for card_type, total, correct in rows:
                print(f"  • {card_type.value}: {correct or 0}/{total}")

        recent = (
            (
                await session.execute(
                    select(Flashcard).order_by(Flashcard.created_at.desc()).limit(5)
                )
            )
            .scalars()
            .all()
        )
        if not recent:
            print("\n- No flashcards found.")
            return 0

        print("\nRecent flashcards:")
        for c in recent:
            print(
                f"  • ID {c.id} | {c.flashcard_type.value} | instance={c.instance_id} | "
                f"Q: {c.question[:100]!r} | A: {c.correct_answer[:60]!r}"
            )
            if c.options:
                print(f"    options={c.options}")

        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
