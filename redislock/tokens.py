"""Lock ownership tokens."""

import secrets

TOKEN_BYTES = 16


def generate_token() -> str:
    """Return a new unguessable token (22 URL-safe characters)."""
    return secrets.token_urlsafe(TOKEN_BYTES)
