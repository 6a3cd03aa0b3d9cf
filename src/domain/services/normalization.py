"""Domain normalization helpers."""

import re

_NON_CODE_CHARS = re.compile(r"[^0-9A-Z]")
_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_account_code(raw_code: str | None) -> str | None:
    """Normalize a raw fin account code before lookup.

    The code is uppercased first, then every character outside ``[0-9A-Z]``
    is dropped, so ``"gc-1234 ab"`` becomes ``"GC1234AB"``.

    Args:
        raw_code: Code as typed by a user or received from a caller.

    Returns:
        str | None: Normalized code, or None when no code was given.
    """
    if raw_code is None:
        return None
    return _NON_CODE_CHARS.sub("", raw_code.upper())


def strip_non_digits(number: str) -> str:
    """Return only the ASCII digits of a numeric identifier."""
    return _NON_DIGITS.sub("", number)


__all__ = ["normalize_account_code", "strip_non_digits"]
