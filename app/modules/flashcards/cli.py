from __future__ import annotations

import argparse
import json
from pathlib import Path

from pydantic import ValidationError

from app.modules.flashcards.main import AnswerGrader, FlashcardsGenerator
from app.modules.flashcards.models.flashcards import FlashcardType, InstanceValues


def _load_instance(args: argparse.Namespace) -> InstanceValues:
    if not args.instance_file:
        raise SystemExit("--instance-file is required")
    path = Path(args.instance_file)
    try:
        return InstanceValues.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SystemExit(f"Cannot read instance file {path}: {e}")
    except ValidationError as e:
        raise SystemExit(f"Invalid instance file {path}: {e}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashcards-gen", description="Typed-data flashcards CLI"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate flashcards for one instance")
    g.add_argument(
        "--instance-file",
        "-f",
        help='JSON file: {"name": ..., "values": [{"name", "type", "value"}]}',
    )

    gr = sub.add_parser("grade", help="Grade a single answer")
    gr.add_argument(
        "--type",
        "-t",
        dest="flashcard_type",
        required=True,
        choices=[t.value for t in FlashcardType],
    )
    gr.add_argument("--correct", "-c", required=True, help="Correct answer")
    gr.add_argument("--answer", "-a", required=True, help="User answer")

    args = parser.parse_args(argv)
    if args.cmd == "generate":
        instance = _load_instance(args)
        if not instance.values:
            print(f"No property values found for instance '{instance.name}'")
            return 1
        cards = FlashcardsGenerator().generate(instance.name, instance.values)
        print(json.dumps(FlashcardsGenerator.to_jsonable(cards), indent=2))
        return 0
    if args.cmd == "grade":
        graded = AnswerGrader().grade(args.flashcard_type, args.correct, args.answer)
        print(
            json.dumps(
                {"is_correct": graded.is_correct, "verdict": graded.verdict.value},
                indent=2,
            )
        )
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
