from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db.base import get_session
from app.core.db.schemas.flashcards import Answer as DBAnswer, Flashcard as DBFlashcard
from app.core.db_services import FlashcardService
from app.modules.flashcards.errors import NoPropertyValuesError, NotFoundError
from app.modules.flashcards.main import AnswerGrader, FlashcardsGenerator
from .schemas import (
    AnswerRead,
    FlashcardRead,
    GenerateFlashcardsRequest,
    SubmitAnswerRequest,
)


router = APIRouter()


def _iso(dt: datetime | None) -> str:
    return dt.isoformat() if dt else ""


def flashcard_read(c: DBFlashcard) -> FlashcardRead:
    return FlashcardRead(
        id=c.id,
        instance_id=c.instance_id,
        property_id=c.property_id,
        flashcard_type=c.flashcard_type,
        question=c.question,
        correct_answer=c.correct_answer,
        options=list(c.options) if c.options is not None else None,
        created_at=_iso(c.created_at),
    )


def answer_read(a: DBAnswer) -> AnswerRead:
    return AnswerRead(
        id=a.id,
        flashcard_id=a.flashcard_id,
        user_answer=a.user_answer,
        is_correct=a.is_correct,
        verdict=a.verdict,
        answered_at=_iso(a.answered_at),
    )


@router.post(
    f"/{settings.app.version}/flashcards/generate",
    response_model=list[FlashcardRead],
    status_code=status.HTTP_201_CREATED,
    tags=["flashcards"],
)
async def generate_flashcards(
    req: GenerateFlashcardsRequest,
    session: AsyncSession = Depends(get_session),
) -> list[FlashcardRead]:
    try:
        rows = await FlashcardsGenerator().generate_with_db(session, req.instance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NoPropertyValuesError as e:
        # nothing to generate; a client error, not a fault
        raise HTTPException(status_code=422, detail=str(e))
    return [flashcard_read(c) for c in rows]


@router.get(
    f"/{settings.app.version}/flashcards",
    response_model=list[FlashcardRead],
    tags=["flashcards"],
)
async def list_flashcards(
    session: AsyncSession = Depends(get_session),
) -> list[FlashcardRead]:
    rows = await FlashcardService(session).list_flashcards()
    return [flashcard_read(c) for c in rows]


@router.get(
    f"/{settings.app.version}/flashcards/{{flashcard_id:int}}",
    response_model=FlashcardRead,
    tags=["flashcards"],
)
async def get_flashcard(
    flashcard_id: int,
    session: AsyncSession = Depends(get_session),
) -> FlashcardRead:
    try:
        c = await FlashcardService(session).get_flashcard(flashcard_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return flashcard_read(c)


@router.get(
    f"/{settings.app.version}/instances/{{instance_id:int}}/flashcards",
    response_model=list[FlashcardRead],
    tags=["flashcards"],
)
async def list_instance_flashcards(
    instance_id: int,
    session: AsyncSession = Depends(get_session),
) -> list[FlashcardRead]:
    rows = await FlashcardService(session).list_flashcards_by_instance(instance_id)
    return [flashcard_read(c) for c in rows]


@router.post(
    f"/{settings.app.version}/flashcards/answers",
    response_model=AnswerRead,
    status_code=status.HTTP_201_CREATED,
    tags=["flashcards"],
)
async def submit_answer(
    req: SubmitAnswerRequest,
    session: AsyncSession = Depends(get_session),
) -> AnswerRead:
    try:
        answer = await AnswerGrader().submit_with_db(
            session, req.flashcard_id, req.user_answer
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return answer_read(answer)
