"""Question, vote and answer Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class QuestionCreate(BaseModel):
    text: str
    ask_token: str


class VisibilityUpdate(BaseModel):
    host_token: str
    is_hidden: bool


class VisibilityOut(BaseModel):
    id: int
    is_hidden: bool

    model_config = {"from_attributes": True}


class VoteCreate(BaseModel):
    question_id: int
    ask_token: str


class VoteOut(BaseModel):
    id: int
    vote_count: int
    has_voted: bool = True


class AnswerCreate(BaseModel):
    question_id: int
    answer_token: str
    core: str
    steps: str
    limits: str


class AnswerOut(BaseModel):
    id: int
    question_id: int
    core: str
    steps: str
    limits: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class QuestionCreated(BaseModel):
    id: int
    text: str
    vote_count: int
    is_hidden: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class QuestionOut(QuestionCreated):
    """Listed question. Voter ids are never exposed."""
    answer: Optional[AnswerOut] = None
