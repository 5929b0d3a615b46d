"""Service logic for AMA sessions: creation, editing, publishing, share links."""

import logging
from typing import List, Optional, Tuple

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from ama.config import settings
from ama.errors import StateError, ValidationError
from ama.models.ama import AMA
from ama.models.question import Question
from ama.services.permissions import Capability, find_session_by_token, require
from ama.services.questions import list_questions
from ama.services.tokens import issue_session_tokens

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def _clean_title(title: Optional[str]) -> str:
    text = (title or "").strip()
    if not text:
        raise ValidationError("Title is required")
    if len(text) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return text


def _clean_description(description: Optional[str]) -> Optional[str]:
    text = (description or "").strip()
    if len(text) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters")
    return text or None


def share_links(ama: AMA) -> dict:
    """Build the four share URLs for an AMA."""
    base = settings.PUBLIC_BASE_URL.rstrip("/")
    return {
        "host": f"{base}/host/{ama.host_token}",
        "ask": f"{base}/ask/{ama.ask_token}",
        "answer": f"{base}/answer/{ama.answer_token}",
        "digest": f"{base}/digest/{ama.digest_token}",
    }


async def create_session(
    db: AsyncSession, title: Optional[str], description: Optional[str] = None
) -> AMA:
    """Create an unpublished AMA with a fresh set of capability tokens."""
    ama = AMA(
        title=_clean_title(title),
        description=_clean_description(description),
        is_published=False,
        **issue_session_tokens(),
    )
    db.add(ama)
    await db.commit()
    await db.refresh(ama)

    logger.info("Created AMA %s", ama.id)
    return ama


async def publish(db: AsyncSession, ama: AMA, host_token: str) -> AMA:
    """
    Publish an AMA. One-way: publishing an already published AMA is a
    StateError, not a no-op.
    """
    require(ama, host_token, Capability.HOST)

    # Conditional write so two concurrent publishes cannot both succeed.
    result = await db.execute(
        update(AMA)
        .where(AMA.id == ama.id, AMA.is_published == False)  # noqa: E712
        .values(is_published=True)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        raise StateError("AMA is already published")

    await db.commit()
    await db.refresh(ama)

    logger.info("Published AMA %s", ama.id)
    return ama


async def update_session(
    db: AsyncSession,
    ama: AMA,
    host_token: str,
    title: Optional[str] = None,
    description: Optional[str] = None,
) -> AMA:
    """
    Edit title/description of a draft AMA.

    Blank or missing values leave the stored field untouched.
    """
    require(ama, host_token, Capability.HOST)
    if ama.is_published:
        raise StateError("AMA is already published")

    if title is not None and title.strip():
        ama.title = _clean_title(title)
    if description is not None and description.strip():
        ama.description = _clean_description(description)

    await db.commit()
    await db.refresh(ama)

    logger.info("Updated AMA %s", ama.id)
    return ama


async def get_session_view(
    db: AsyncSession, token: str
) -> Tuple[AMA, Capability, List[Question]]:
    """Resolve any of the four tokens and return the AMA with the questions that role may see."""
    ama, capability = await find_session_by_token(db, token)
    questions = await list_questions(db, ama, token)
    return ama, capability, questions
