"""Service logic for questions: asking, hiding, and role-filtered listing."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ama.errors import AuthError, NotFoundError, StateError, ValidationError
from ama.models.ama import AMA
from ama.models.question import QUESTION_MAX_LENGTH, Question
from ama.services.permissions import Capability, require, resolve

logger = logging.getLogger(__name__)

# Roles that never see hidden questions.
FILTERED_VIEWS = {Capability.ASK, Capability.DIGEST}


def validate_question_text(text: Optional[str]) -> str:
    """Trim ``text`` and check it is 1–140 characters."""
    cleaned = (text or "").strip()
    if not cleaned or len(cleaned) > QUESTION_MAX_LENGTH:
        raise ValidationError(f"Question must be between 1 and {QUESTION_MAX_LENGTH} characters")
    return cleaned


async def get_question(db: AsyncSession, question_id: int) -> Question:
    """Load a question with its AMA and answer, or raise NotFoundError."""
    result = await db.execute(
        select(Question)
        .options(selectinload(Question.ama), selectinload(Question.answer))
        .where(Question.id == question_id)
        .execution_options(populate_existing=True)
    )
    question = result.scalar_one_or_none()
    if not question:
        raise NotFoundError("Question not found")
    return question


async def create_question(db: AsyncSession, ask_token: str, text: Optional[str]) -> Question:
    """Ask a question on the published AMA that owns ``ask_token``."""
    ama = None
    if ask_token:
        result = await db.execute(select(AMA).where(AMA.ask_token == ask_token))
        ama = result.scalar_one_or_none()
    if not ama:
        raise AuthError("Invalid ask token")

    cleaned = validate_question_text(text)

    if not ama.is_published:
        raise StateError("AMA is not published yet")

    question = Question(ama_id=ama.id, text=cleaned, vote_count=0, is_hidden=False)
    db.add(question)
    await db.commit()
    await db.refresh(question)

    logger.info("Question %s asked on AMA %s", question.id, ama.id)
    return question


async def set_question_visibility(
    db: AsyncSession, question_id: int, host_token: str, hidden: bool
) -> Question:
    """Hide or show a question. Host only; repeatable in both directions."""
    question = await get_question(db, question_id)
    require(question.ama, host_token, Capability.HOST)

    question.is_hidden = bool(hidden)
    await db.commit()

    logger.info("Question %s %s", question.id, "hidden" if question.is_hidden else "shown")
    return question


async def list_questions(db: AsyncSession, ama: AMA, token: str) -> List[Question]:
    """
    Questions of ``ama`` ranked by votes (ties in insertion order).

    Ask and digest views exclude hidden questions; host and answer views
    see everything.
    """
    capability = resolve(ama, token)
    if capability is Capability.NONE:
        raise NotFoundError("AMA not found")

    query = (
        select(Question)
        .options(selectinload(Question.answer))
        .where(Question.ama_id == ama.id)
        .order_by(Question.vote_count.desc(), Question.id.asc())
        .execution_options(populate_existing=True)
    )
    if capability in FILTERED_VIEWS:
        query = query.where(Question.is_hidden == False)  # noqa: E712

    result = await db.execute(query)
    return list(result.scalars().all())
