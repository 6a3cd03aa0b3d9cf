"""Random account code candidates."""

import secrets

from src.domain.constants import CODE_ALPHABET

_SYSTEM_RANDOM = secrets.SystemRandom()


def generate_candidate_code(length: int, rng=None) -> str:
    """Draw a random code of exactly ``length`` alphanumeric characters.

    Args:
        length: Number of characters in the code.
        rng: Optional object with a ``choice`` method. Defaults to a
            cryptographically strong source, since codes double as PINs.

    Returns:
        str: Candidate code over ``0-9A-Z``.

    Raises:
        ValueError: If length is smaller than one.
    """
    if length < 1:
        raise ValueError(f"Code length must be positive: {length}")
    source = rng or _SYSTEM_RANDOM
    return "".join(source.choice(CODE_ALPHABET) for _ in range(length))


__all__ = ["generate_candidate_code"]
