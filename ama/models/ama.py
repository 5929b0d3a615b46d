"""AMA session model — one Q&A event addressed by four capability tokens."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ama.database import Base


class AMA(Base):
    __tablename__ = "amas"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # ── Capability tokens (fixed role per column, never rotated) ──
    host_token: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    ask_token: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    answer_token: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    digest_token: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # ── Relationships ──
    questions: Mapped[List["Question"]] = relationship(  # noqa: F821
        "Question", back_populates="ama", cascade="all, delete-orphan"
    )
