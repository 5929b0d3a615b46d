"""Questions router — ask and hide/show."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ama.database import get_db
from ama.schemas.question import QuestionCreate, QuestionCreated, VisibilityOut, VisibilityUpdate
from ama.services.questions import create_question, set_question_visibility

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.post("", response_model=QuestionCreated)
async def ask_question(body: QuestionCreate, db: AsyncSession = Depends(get_db)):
    """Submit a question with the AMA's ask token."""
    return await create_question(db, body.ask_token, body.text)


@router.put("/{question_id}/hide", response_model=VisibilityOut)
async def hide_question(
    question_id: int,
    body: VisibilityUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Hide or unhide a question (host token only)."""
    return await set_question_visibility(db, question_id, body.host_token, body.is_hidden)
