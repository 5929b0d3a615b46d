"""AMA router — create, view, publish/edit, and digest by capability token."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ama.database import get_db
from ama.schemas.ama import (
    AMACreate,
    AMACreated,
    AMAOut,
    AMAUpdate,
    AMAView,
    DigestOut,
    GuestTokens,
    Permissions,
    ShareLinks,
)
from ama.schemas.question import QuestionOut
from ama.services.digest import build_digest
from ama.services.permissions import Capability, find_session_by_token, permission_flags
from ama.services.sessions import create_session, get_session_view, publish, share_links, update_session

router = APIRouter(prefix="/api/ama", tags=["ama"])


# ═══════════════════════════════════════════════════════════════
#  POST /api/ama → create a draft AMA, returns all four tokens
# ═══════════════════════════════════════════════════════════════

@router.post("", response_model=AMACreated)
async def create_ama(body: AMACreate, db: AsyncSession = Depends(get_db)):
    ama = await create_session(db, body.title, body.description)
    return AMACreated(
        **AMAOut.model_validate(ama).model_dump(),
        host_token=ama.host_token,
        ask_token=ama.ask_token,
        answer_token=ama.answer_token,
        digest_token=ama.digest_token,
        links=ShareLinks(**share_links(ama)),
    )


# ═══════════════════════════════════════════════════════════════
#  GET /api/ama/{token} → role-filtered view (clients poll this)
# ═══════════════════════════════════════════════════════════════

@router.get("/{token}", response_model=AMAView)
async def read_ama(token: str, db: AsyncSession = Depends(get_db)):
    ama, capability, questions = await get_session_view(db, token)

    view = AMAView(
        **AMAOut.model_validate(ama).model_dump(),
        questions=[QuestionOut.model_validate(q) for q in questions],
        permissions=Permissions(**permission_flags(capability)),
    )
    if capability is Capability.HOST:
        view.tokens = GuestTokens(
            ask_token=ama.ask_token,
            answer_token=ama.answer_token,
            digest_token=ama.digest_token,
        )
        view.links = ShareLinks(**share_links(ama))
    return view


# ═══════════════════════════════════════════════════════════════
#  PUT /api/ama/{token} → publish or edit (host token only)
# ═══════════════════════════════════════════════════════════════

@router.put("/{token}", response_model=AMAOut)
async def modify_ama(token: str, body: AMAUpdate, db: AsyncSession = Depends(get_db)):
    ama, _ = await find_session_by_token(db, token)

    if body.action == "publish":
        ama = await publish(db, ama, token)
    else:
        ama = await update_session(db, ama, token, title=body.title, description=body.description)
    return ama


# ═══════════════════════════════════════════════════════════════
#  GET /api/ama/{token}/digest → read-only digest
# ═══════════════════════════════════════════════════════════════

@router.get("/{token}/digest", response_model=DigestOut)
async def read_digest(token: str, db: AsyncSession = Depends(get_db)):
    digest = await build_digest(db, token)
    for key in ("answered", "unanswered"):
        digest[key] = [QuestionOut.model_validate(q) for q in digest[key]]
    return DigestOut(**digest)
