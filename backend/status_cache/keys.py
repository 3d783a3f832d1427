"""
Cache key validation.

A key is the three-digit status code taken from the request path.
"""

import re
from typing import Optional

KEY_PATTERN = re.compile(r"[0-9]{3}")


def validate_key(raw: Optional[str]) -> Optional[str]:
    """
    Return the key if `raw` is exactly three decimal digits, None otherwise.

    Examples:
        validate_key("404")   -> "404"
        validate_key("42")    -> None
        validate_key("404/")  -> None
    """
    if not raw:
        return None
    if KEY_PATTERN.fullmatch(raw) is None:
        return None
    return raw
