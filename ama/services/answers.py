"""Answer submission gate — one immutable answer per question."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ama.errors import ConflictError, StateError, ValidationError
from ama.models.answer import Answer
from ama.services.permissions import Capability, require
from ama.services.questions import get_question

logger = logging.getLogger(__name__)

ANSWER_FIELDS = ("core", "steps", "limits")


async def submit_answer(
    db: AsyncSession,
    question_id: int,
    answer_token: str,
    core: Optional[str],
    steps: Optional[str],
    limits: Optional[str],
) -> Answer:
    """Answer a question on a published AMA. Unanswered → Answered is terminal."""
    question = await get_question(db, question_id)
    require(question.ama, answer_token, Capability.ANSWER)
    if not question.ama.is_published:
        raise StateError("AMA is not published yet")
    if question.answer is not None:
        raise ConflictError("Question already has an answer")

    fields = {
        name: (value or "").strip()
        for name, value in zip(ANSWER_FIELDS, (core, steps, limits))
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(f"All fields are required: {', '.join(missing)}")

    answer = Answer(question_id=question.id, **fields)
    db.add(answer)
    try:
        await db.flush()
    except IntegrityError:
        # Lost a race against another submission for the same question.
        await db.rollback()
        raise ConflictError("Question already has an answer")

    await db.commit()
    await db.refresh(answer)

    logger.info("Answer %s submitted for question %s", answer.id, question_id)
    return answer
