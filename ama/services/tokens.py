"""Capability token issuing."""

import secrets
from typing import Optional

from ama.config import settings

TOKEN_FIELDS = ("host_token", "ask_token", "answer_token", "digest_token")


def generate_token(nbytes: Optional[int] = None) -> str:
    """Return a URL-safe token drawn from the OS CSPRNG."""
    return secrets.token_urlsafe(nbytes or settings.TOKEN_BYTES)


def issue_session_tokens() -> dict:
    """
    Draw the four independent capability tokens for a new AMA.

    Keys match the token columns on ``AMA`` so the result can be splatted
    straight into the model.
    """
    while True:
        tokens = {field: generate_token() for field in TOKEN_FIELDS}
        if len(set(tokens.values())) == len(TOKEN_FIELDS):
            return tokens
