"""Caller identification from the sign-in cookie."""

import json
from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote

from fastapi import Request

AUTH_COOKIE = "google-auth-user"


@dataclass
class Caller:
    """Who is making a request."""

    user_id: Optional[str] = None
    is_authenticated: bool = False


def resolve_caller(request: Request) -> Caller:
    """Identify the caller from the sign-in cookie.

    The cookie holds the signed-in user's profile as JSON. It only counts
    when it carries both an email and a subject id.
    """
    raw = request.cookies.get(AUTH_COOKIE)
    if not raw:
        return Caller()

    try:
        data = json.loads(unquote(raw))
    except ValueError:
        return Caller()

    if isinstance(data, dict) and data.get("email") and data.get("sub"):
        return Caller(user_id=str(data["sub"]), is_authenticated=True)
    return Caller()
