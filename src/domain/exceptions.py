"""Exceptions raised by the fin account core."""


class FinAccountError(Exception):
    """Base exception for all fin account errors."""


class CodeSpaceExhaustedError(FinAccountError):
    """Raised when no unique account code was found within the attempt limit.

    The message carries the requested length and attempt count only, never a
    candidate code.
    """

    def __init__(self, length: int, attempts: int) -> None:
        self.length = length
        self.attempts = attempts
        super().__init__(
            f"Unable to locate unique fin account code after {attempts} "
            f"attempts (length={length})"
        )


class AmbiguousFinAccountError(FinAccountError):
    """Raised when more than one valid account matches a code."""

    def __init__(self, match_count: int) -> None:
        self.match_count = match_count
        super().__init__(f"Multiple fin accounts found ({match_count})")


class DuplicateFinAccountCodeError(FinAccountError):
    """Raised when an insert violates the unique account code constraint."""


__all__ = [
    "FinAccountError",
    "CodeSpaceExhaustedError",
    "AmbiguousFinAccountError",
    "DuplicateFinAccountCodeError",
]
