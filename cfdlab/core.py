"""Library-level entry points."""


def ping() -> int:
    """Return 1; used to check that the library is importable and callable."""
    return 1