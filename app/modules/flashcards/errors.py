"""Named failures surfaced by the flashcards services."""

from __future__ import annotations

from typing import Optional


class FlashcardsError(Exception):
    """Base class for conditions the caller must handle."""


class NotFoundError(FlashcardsError):
    def __init__(self, entity: str, identifier: int) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class NoPropertyValuesError(FlashcardsError):
    """The instance exists but there is nothing to generate from."""

    def __init__(self, instance_id: Optional[int] = None) -> None:
        self.instance_id = instance_id
        if instance_id is None:
            super().__init__("No property values to generate flashcards from")
        else:
            super().__init__(f"No property values found for instance {instance_id}")
