from __future__ import annotations

import re

_LOCATION_PATTERN = re.compile(r".*[a-zA-Z]+.*")


def is_valid_location_input(text: str) -> bool:
    """Accept free text as a location query only if it contains an ASCII letter."""
    if not isinstance(text, str):
        return False
    return _LOCATION_PATTERN.fullmatch(text) is not None


__all__ = ["is_valid_location_input"]
