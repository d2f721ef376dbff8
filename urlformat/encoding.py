# urlformat/encoding.py
from urllib.parse import quote, quote_plus

SPACE_PERCENT = "%20"
SPACE_PLUS = "+"
SPACE_CONVENTIONS = {SPACE_PERCENT, SPACE_PLUS}


def percent_encode(value: str, space: str = SPACE_PERCENT) -> str:
    """Percent-encode everything except A-Z a-z 0-9 and - _ . ~ (UTF-8, uppercase hex)."""
    if space == SPACE_PERCENT:
        return quote(value, safe="")
    if space == SPACE_PLUS:
        # '+' in the input still becomes %2B, so the two stay distinguishable
        return quote_plus(value, safe="")
    raise ValueError(f"Unknown space convention: {space!r}")
