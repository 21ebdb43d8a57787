"""Opaque identifier generation for entities and export tracking."""

import secrets

# 16 random bytes encode to 22 URL-safe base64 characters without padding
ID_BYTES = 16
ID_LENGTH = 22


def generate_id() -> str:
    """
    Generate an opaque, URL-safe, collision-resistant identifier.

    Identifiers carry 128 bits of randomness, are not ordered and
    only use the characters ``[A-Za-z0-9_-]``.

    Returns:
        A 22-character identifier
    """
    return secrets.token_urlsafe(ID_BYTES)
