"""General utility functions and helper classes."""

import re
import unicodedata

NON_ALPHANUMERIC_RUN = re.compile(r"[^a-zA-Z0-9]+")


def strip_diacritics(text: str) -> str:
    """Decompose accented characters and drop the combining marks, keeping the base letters."""
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if not unicodedata.combining(char))


def slugify(text: str) -> str:
    """Slugify text for use in branch names (lowercase ASCII alphanumerics joined by single hyphens).

    Args:
        text: Arbitrary human-readable text.

    Returns:
        The slug. Empty if the text holds no ASCII letters or digits once
        diacritics are removed.

    Example:
        >>> slugify("Spécial Chàracters")
        'special-characters'
    """
    slug = strip_diacritics(text)
    slug = NON_ALPHANUMERIC_RUN.sub("-", slug)
    slug = slug.strip("-")
    return slug.lower()
