"""Tests for random code candidates."""

import random

import pytest

from src.domain.constants import CODE_ALPHABET
from src.domain.services.codes import generate_candidate_code


def test_code_alphabet_has_digits_and_uppercase_letters() -> None:
    """The alphabet should contain exactly 36 alphanumeric symbols."""
    assert len(CODE_ALPHABET) == 36
    assert set(CODE_ALPHABET) == set("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def test_generate_candidate_code_has_requested_length() -> None:
    """Candidates should use only alphabet symbols at the given length."""
    code = generate_candidate_code(24)

    assert len(code) == 24
    assert set(code) <= set(CODE_ALPHABET)


def test_generate_candidate_code_uses_injected_source() -> None:
    """A seeded source should give reproducible candidates."""
    first = generate_candidate_code(8, random.Random(42))
    second = generate_candidate_code(8, random.Random(42))

    assert first == second


def test_generate_candidate_code_rejects_non_positive_length() -> None:
    """Zero or negative lengths should raise ValueError."""
    with pytest.raises(ValueError):
        generate_candidate_code(0)
