"""
Shared test helpers for the Daily Diet test suite.

Helpers drive the API the way a browser would: register through POST /users
and let the client's cookie jar carry the session cookie afterwards.
"""

import uuid
from datetime import datetime, timezone

SESSION_COOKIE = "sessionId"

# Realistic default users
REALISTIC_USERS = {
    "default": {"name": "Ana Souza", "email_prefix": "ana.souza"},
    "athlete": {"name": "Michael Chen", "email_prefix": "michael.chen"},
    "casual": {"name": "Emma Johnson", "email_prefix": "emma.johnson"},
}

# Realistic meal payloads
LUNCH = {"name": "Lunch", "description": "rice, beans and grilled chicken", "is_on_diet": True}
SNACK = {"name": "Snack", "description": "chocolate bar", "is_on_diet": False}


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


def register_user(client, profile_type: str = "default") -> str:
    """
    Register a user from a cookie-less client and return the issued session token.

    The token stays in the client's cookie jar, so later requests on the
    same client act as this user.
    """
    profile = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    client.cookies.clear()
    response = client.post(
        "/users",
        json={"name": profile["name"], "email": unique_email(profile["email_prefix"])},
    )
    assert response.status_code == 201
    token = response.cookies.get(SESSION_COOKIE)
    assert token
    return token


def use_session(client, token: str) -> None:
    """Make the client present the given session token"""
    client.cookies.clear()
    client.cookies.set(SESSION_COOKIE, token)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp from a response; naive values are UTC"""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
