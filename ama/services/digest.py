"""Read-only digest of an AMA: stats plus answered and unanswered questions."""

from sqlalchemy.ext.asyncio import AsyncSession

from ama.errors import StateError
from ama.services.permissions import Capability, find_session_by_token
from ama.services.questions import list_questions

DIGEST_VIEWS = (Capability.DIGEST, Capability.HOST)


async def build_digest(db: AsyncSession, token: str) -> dict:
    """
    Assemble the digest for the AMA owning ``token``.

    Only the digest token (or the host token, as a preview) opens the digest;
    the digest role additionally requires the AMA to be published.
    """
    ama, capability = await find_session_by_token(db, token, allowed=DIGEST_VIEWS)
    if capability is Capability.DIGEST and not ama.is_published:
        raise StateError("AMA is not published yet")

    questions = await list_questions(db, ama, token)
    answered = [q for q in questions if q.answer is not None]
    unanswered = [q for q in questions if q.answer is None]

    return {
        "id": ama.id,
        "title": ama.title,
        "description": ama.description,
        "is_published": ama.is_published,
        "created_at": ama.created_at,
        "stats": {
            "total_questions": len(questions),
            "total_votes": sum(q.vote_count for q in questions),
            "answered": len(answered),
            "unanswered": len(unanswered),
        },
        "answered": answered,
        "unanswered": unanswered,
    }
