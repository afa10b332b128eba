"""Fresh identifiers for items and pages created during editing."""

import uuid


def generate_id(prefix: str) -> str:
    """Return a new unique id such as ``split-3f2a...``."""
    return f"{prefix}-{uuid.uuid4().hex}"
