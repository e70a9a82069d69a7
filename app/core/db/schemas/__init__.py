# Import models so Alembic and Base metadata are aware of them
from .catalog import DataType, Property, Instance, PropertyValue  # noqa: F401
from .flashcards import Flashcard, Answer  # noqa: F401
