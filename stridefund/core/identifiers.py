"""Identity generation: process-wide unique string ids."""

import uuid

ID_LENGTH = 32


def new_id() -> str:
    """Return a fresh 32-hex-character identifier (128 random bits)."""
    return uuid.uuid4().hex
