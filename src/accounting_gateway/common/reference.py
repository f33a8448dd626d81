"""Estonian bank payment reference numbers (viitenumber).

The check digit uses the 3-7-1 method: digits are weighted 7, 3, 1, 7, 3, 1 ...
starting from the rightmost digit, and the check digit brings the weighted sum
up to the next multiple of ten.

    >>> generate_reference("1234")
    '12344'
    >>> validate_reference("12344")
    True
"""

from __future__ import annotations

from accounting_gateway.common.errors import InvalidInputError

_WEIGHTS = (7, 3, 1)
_DIGITS = frozenset("0123456789")


def _is_digits(s: str) -> bool:
    # str.isdigit() accepts non-ASCII digits; banks do not.
    return bool(s) and all(ch in _DIGITS for ch in s)


def check_digit(base: str) -> int:
    """Return the 3-7-1 check digit for an all-digit ``base``."""

    total = 0
    for i, ch in enumerate(reversed(base)):
        total += int(ch) * _WEIGHTS[i % 3]
    return (10 - total % 10) % 10


def generate_reference(base: str) -> str:
    """Append the check digit to ``base``.

    Surrounding whitespace is trimmed; anything else that is not an ASCII
    digit raises ``InvalidInputError``.
    """

    base = base.strip()
    if not base:
        raise InvalidInputError("reference base cannot be empty")
    if not _is_digits(base):
        raise InvalidInputError(f"reference base must contain only digits, got: {base!r}")
    return base + str(check_digit(base))


def validate_reference(candidate: str) -> bool:
    candidate = candidate.strip()
    if len(candidate) < 2 or not _is_digits(candidate):
        return False
    return check_digit(candidate[:-1]) == int(candidate[-1])
