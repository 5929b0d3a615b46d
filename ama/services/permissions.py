"""Token → capability resolution."""

import enum
import logging
import secrets
from typing import Iterable, Optional, Tuple

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ama.errors import AuthError, NotFoundError
from ama.models.ama import AMA

logger = logging.getLogger(__name__)


class Capability(str, enum.Enum):
    HOST = "host"
    ASK = "ask"
    ANSWER = "answer"
    DIGEST = "digest"
    NONE = "none"


# Resolution order; each role maps to exactly one token column.
TOKEN_COLUMNS = {
    Capability.HOST: "host_token",
    Capability.ASK: "ask_token",
    Capability.ANSWER: "answer_token",
    Capability.DIGEST: "digest_token",
}


def holds(ama: AMA, token: Optional[str], capability: Capability) -> bool:
    """True if ``token`` is exactly the AMA's token for ``capability``."""
    column = TOKEN_COLUMNS.get(capability)
    if not token or column is None:
        return False
    return secrets.compare_digest(getattr(ama, column).encode(), token.encode())


def resolve(ama: AMA, token: Optional[str]) -> Capability:
    """Return the capability ``token`` grants on ``ama``, or ``Capability.NONE``."""
    for capability in TOKEN_COLUMNS:
        if holds(ama, token, capability):
            return capability
    return Capability.NONE


def permission_flags(capability: Capability) -> dict:
    """Boolean view of a capability, as returned to clients."""
    return {
        "is_host": capability is Capability.HOST,
        "can_ask": capability is Capability.ASK,
        "can_answer": capability is Capability.ANSWER,
        "is_digest": capability is Capability.DIGEST,
    }


def require(ama: AMA, token: Optional[str], capability: Capability) -> None:
    """Raise AuthError unless ``token`` is the AMA's token for ``capability``."""
    if not holds(ama, token, capability):
        logger.info("Rejected %s-only operation on AMA %s", capability.value, ama.id)
        raise AuthError(f"Token does not grant {capability.value} access")


async def find_session_by_token(
    db: AsyncSession,
    token: str,
    allowed: Optional[Iterable[Capability]] = None,
) -> Tuple[AMA, Capability]:
    """
    Look up the AMA owning ``token`` in any of its four token columns.

    Raises NotFoundError when nothing matches, or when the matched capability
    is not in ``allowed``; both cases look the same to the caller.
    """
    if not token:
        raise NotFoundError("AMA not found")

    result = await db.execute(
        select(AMA).where(
            or_(
                AMA.host_token == token,
                AMA.ask_token == token,
                AMA.answer_token == token,
                AMA.digest_token == token,
            )
        )
    )
    ama = result.scalars().first()
    if not ama:
        raise NotFoundError("AMA not found")

    capability = resolve(ama, token)
    if capability is Capability.NONE or (allowed is not None and capability not in set(allowed)):
        raise NotFoundError("AMA not found")
    return ama, capability
