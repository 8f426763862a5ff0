"""Primary key generation (CUID2)."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant id for entity and document rows."""
    return str(_next_cuid())
