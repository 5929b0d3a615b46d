"""Voter identity heuristic from proxy headers.

Headers are client-controlled, so this is trivially spoofable; it is a
dedupe hint, not an identity.
"""

from fastapi import Request

from ama.config import settings


def get_voter_id(request: Request) -> str:
    """First X-Forwarded-For entry, else X-Real-IP, else the configured fallback."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = (request.headers.get("x-real-ip") or "").strip()
    if real_ip:
        return real_ip

    return settings.VOTER_FALLBACK_ID
