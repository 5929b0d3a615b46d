"""Answers router — experts answer with the answer token."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ama.database import get_db
from ama.schemas.question import AnswerCreate, AnswerOut
from ama.services.answers import submit_answer

router = APIRouter(prefix="/api/answers", tags=["answers"])


@router.post("", response_model=AnswerOut)
async def answer_question(body: AnswerCreate, db: AsyncSession = Depends(get_db)):
    return await submit_answer(
        db,
        body.question_id,
        body.answer_token,
        core=body.core,
        steps=body.steps,
        limits=body.limits,
    )
