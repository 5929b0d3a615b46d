"""AMA Pydantic schemas."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

from ama.schemas.question import QuestionOut


class AMACreate(BaseModel):
    title: str
    description: Optional[str] = None


class AMAUpdate(BaseModel):
    """Body of PUT /api/ama/{token}: publish, or edit a draft."""
    action: Literal["publish", "update"]
    title: Optional[str] = None
    description: Optional[str] = None


class ShareLinks(BaseModel):
    host: str
    ask: str
    answer: str
    digest: str


class GuestTokens(BaseModel):
    """Tokens the host hands out; returned on the host view only."""
    ask_token: str
    answer_token: str
    digest_token: str


class Permissions(BaseModel):
    is_host: bool
    can_ask: bool
    can_answer: bool
    is_digest: bool


class AMACreated(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    is_published: bool
    created_at: Optional[datetime] = None
    host_token: str
    ask_token: str
    answer_token: str
    digest_token: str
    links: ShareLinks

    model_config = {"from_attributes": True}


class AMAOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    is_published: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AMAView(AMAOut):
    """Any-token view of an AMA; ``tokens`` and ``links`` are host-only."""
    questions: List[QuestionOut]
    permissions: Permissions
    tokens: Optional[GuestTokens] = None
    links: Optional[ShareLinks] = None


class DigestStats(BaseModel):
    total_questions: int
    total_votes: int
    answered: int
    unanswered: int


class DigestOut(AMAOut):
    stats: DigestStats
    answered: List[QuestionOut]
    unanswered: List[QuestionOut]
