"""create catalog and flashcard tables

Revision ID: 3c1d9a7e52b0
Revises:
Create Date: 2026-10-19 10:12:41.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d9a7e52b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


property_type = sa.Enum("string", "number", "boolean", name="property_type")
flashcard_type = sa.Enum(
    "true_false", "multiple_choice", "fill_in_blank", name="flashcard_type"
)
answer_verdict = sa.Enum("correct", "incorrect", "ungradeable", name="answer_verdict")


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name, sa.DateTime(), server_default=sa.text("now()"), nullable=False
    )


def _index(table: str, *columns: str) -> None:
    for column in columns:
        op.create_index(
            op.f(f"ix_{table}_{column}"), table, [column], unique=False
        )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "data_types",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("data_types", "id", "created_at")

    op.create_table(
        "properties",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("property_type", property_type, nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["type_id"], ["data_types.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("properties", "id", "type_id", "created_at")

    op.create_table(
        "instances",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["type_id"], ["data_types.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("instances", "id", "type_id", "created_at")

    op.create_table(
        "property_values",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("instance_id", sa.Integer(), nullable=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["instance_id"], ["instances.id"]),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("property_values", "id", "instance_id", "property_id", "created_at")

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("instance_id", sa.Integer(), nullable=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("flashcard_type", flashcard_type, nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("correct_answer", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["instance_id"], ["instances.id"]),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("flashcards", "id", "instance_id", "property_id", "created_at")

    op.create_table(
        "answers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("flashcard_id", sa.Integer(), nullable=False),
        sa.Column("user_answer", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("verdict", answer_verdict, nullable=False),
        _created_at("answered_at"),
        sa.ForeignKeyConstraint(["flashcard_id"], ["flashcards.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("answers", "id", "flashcard_id", "answered_at")


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "answers",
        "flashcards",
        "property_values",
        "instances",
        "properties",
        "data_types",
    ):
        op.drop_table(table)
    bind = op.get_bind()
    answer_verdict.drop(bind, checkfirst=True)
    flashcard_type.drop(bind, checkfirst=True)
    property_type.drop(bind, checkfirst=True)
