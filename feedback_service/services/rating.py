"""Rating validation shared by the read and write paths."""

import re

from feedback_service.services.errors import InvalidRange, MalformedInput

MIN_RATING = 1
MAX_RATING = 5

# Optional sign and ASCII digits only; int() alone also takes "1_0" and "٣"
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_valid_rating(rating: int) -> bool:
    """Return True if rating is an integer from 1 through 5."""
    return MIN_RATING <= rating <= MAX_RATING


def parse_rating(raw: str) -> int:
    """
    Parse a rating query parameter.

    Raises:
        MalformedInput: raw is not an integer
        InvalidRange: raw is an integer outside 1-5
    """
    if not _INTEGER_PATTERN.fullmatch(raw.strip()):
        raise MalformedInput(f"Rating must be an integer, got {raw!r}")

    rating = int(raw)
    if not is_valid_rating(rating):
        raise InvalidRange()
    return rating
