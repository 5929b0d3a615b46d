"""Vote ledger — at most one vote per voter id per question."""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ama.errors import ConflictError, StateError
from ama.models.question import Question
from ama.models.question_vote import QuestionVote
from ama.services.permissions import Capability, require
from ama.services.questions import get_question

logger = logging.getLogger(__name__)


async def cast_vote(db: AsyncSession, question_id: int, ask_token: str, voter_id: str) -> int:
    """
    Record one vote from ``voter_id`` and return the new vote count.

    The ledger row and the counter increment commit together. A second vote
    from the same voter hits the (question_id, voter_id) primary key and is
    rejected with ConflictError, even when both requests race.
    """
    question = await get_question(db, question_id)
    require(question.ama, ask_token, Capability.ASK)
    if not question.ama.is_published:
        raise StateError("AMA is not published yet")

    db.add(QuestionVote(question_id=question.id, voter_id=voter_id))
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        logger.info("Duplicate vote rejected on question %s", question_id)
        raise ConflictError("You have already voted on this question")

    await db.execute(
        update(Question)
        .where(Question.id == question.id)
        .values(vote_count=Question.vote_count + 1)
        .execution_options(synchronize_session=False)
    )
    await db.commit()

    result = await db.execute(select(Question.vote_count).where(Question.id == question_id))
    vote_count = result.scalar_one()

    logger.info("Vote cast on question %s (now %d)", question_id, vote_count)
    return vote_count
