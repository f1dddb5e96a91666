"""Helpers for building LIKE filters."""

LIKE_ESCAPE = "\\"


def contains_pattern(fragment: str) -> str:
    """Return a LIKE pattern matching ``fragment`` anywhere, wildcards escaped."""
    escaped = (
        fragment.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
