"""Votes router — one upvote per voter id."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ama.database import get_db
from ama.schemas.question import VoteCreate, VoteOut
from ama.services.votes import cast_vote
from ama.utils.client_ip import get_voter_id

router = APIRouter(prefix="/api/votes", tags=["votes"])


@router.post("", response_model=VoteOut)
async def vote_question(
    body: VoteCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    vote_count = await cast_vote(db, body.question_id, body.ask_token, get_voter_id(request))
    return VoteOut(id=body.question_id, vote_count=vote_count)
