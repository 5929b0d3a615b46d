"""Question model — audience questions ranked by votes."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ama.database import Base

QUESTION_MAX_LENGTH = 140


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    ama_id: Mapped[int] = mapped_column(
        ForeignKey("amas.id", ondelete="CASCADE"), index=True, nullable=False
    )
    text: Mapped[str] = mapped_column(String(QUESTION_MAX_LENGTH), nullable=False)

    # Always equal to the number of rows in question_votes for this question.
    vote_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # ── Relationships ──
    ama: Mapped["AMA"] = relationship("AMA", back_populates="questions")  # noqa: F821
    answer: Mapped[Optional["Answer"]] = relationship(  # noqa: F821
        "Answer", back_populates="question", uselist=False, cascade="all, delete-orphan"
    )
    votes: Mapped[List["QuestionVote"]] = relationship(  # noqa: F821
        "QuestionVote", cascade="all, delete-orphan"
    )
