"""Decoy option synthesis for multiple-choice flashcards.

Every property type yields exactly three decoys that differ from the correct
answer and from each other (compared trimmed and case-insensitively, the way
the grader compares them). Colliding candidates are skipped in favour of the
next candidate, so small numbers such as ``0`` still get three decoys.
"""

from __future__ import annotations

import itertools
import math
import re
from decimal import Decimal
from typing import Iterable, Iterator, Optional

from app.core.logging import get_logger
from app.modules.flashcards.grading import classify_boolean
from app.modules.flashcards.models.flashcards import PropertyType

logger = get_logger(__name__)

FAKE_OPTION_COUNT = 3

STRING_DECOYS: tuple[str, ...] = (
    "Unknown",
    "Not Available",
    "Placeholder",
    "Default Value",
    "Sample Text",
    "Test Data",
)
NUMBER_FALLBACK_DECOYS: tuple[str, ...] = ("42", "0", "100")
BOOLEAN_FILLERS: tuple[str, ...] = ("maybe", "unknown")

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _key(text: str) -> str:
    return text.strip().lower()


def format_number(value: float) -> str:
    """Render a float the way a JavaScript number prints.

    ``11`` rather than ``11.0``, positional notation between ``1e-6`` and
    ``1e21``, and unpadded exponents (``2e-7``) outside that range.
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def parse_number(text: str) -> Optional[float]:
    """Read the leading decimal number of ``text``; ``"12 kg"`` is 12.

    Returns None when there is no leading number or it is not finite.
    """
    match = _NUMBER_PREFIX.match(text.lstrip())
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def _generic_decoys(start: int) -> Iterator[str]:
    for n in itertools.count(start):
        yield f"Option {n}"


def _numeric_candidates(value: float) -> Iterator[str]:
    yield format_number(value + 1)
    yield format_number(value - 1)
    yield format_number(value * 2)
    # at large magnitudes value + step == value; division still moves it
    for step in itertools.count(2):
        yield format_number(value + step)
        yield format_number(value - step)
        yield format_number(value / step)


def _take_distinct(
    candidates: Iterable[str], correct_answer: str, *, exclude_value: Optional[float] = None
) -> list[str]:
    seen = {_key(correct_answer)}
    picked: list[str] = []
    for candidate in candidates:
        if _key(candidate) in seen:
            continue
        if exclude_value is not None and parse_number(candidate) == exclude_value:
            continue
        seen.add(_key(candidate))
        picked.append(candidate)
        if len(picked) == FAKE_OPTION_COUNT:
            break
    return picked


def synthesize_fake_options(
    correct_answer: str, property_type: PropertyType | str
) -> list[str]:
    """Return three plausible but wrong answers for ``correct_answer``."""
    property_type = PropertyType(property_type)

    if property_type == PropertyType.NUMBER:
        value = parse_number(correct_answer)
        if value is None:
            logger.debug(
                f"Malformed numeric value {correct_answer!r}; using fallback decoys"
            )
            candidates = itertools.chain(NUMBER_FALLBACK_DECOYS, _generic_decoys(1))
            return _take_distinct(candidates, correct_answer)
        return _take_distinct(
            _numeric_candidates(value), correct_answer, exclude_value=value
        )

    if property_type == PropertyType.BOOLEAN:
        negation = "false" if classify_boolean(correct_answer) is True else "true"
        candidates = itertools.chain((negation,), BOOLEAN_FILLERS, _generic_decoys(1))
        return _take_distinct(candidates, correct_answer)

    remaining = [d for d in STRING_DECOYS if _key(d) != _key(correct_answer)]
    candidates = itertools.chain(
        remaining[:FAKE_OPTION_COUNT],
        _generic_decoys(min(len(remaining), FAKE_OPTION_COUNT) + 1),
    )
    return _take_distinct(candidates, correct_answer)
