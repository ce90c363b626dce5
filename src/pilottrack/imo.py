"""IMO ship identification number validation."""

import re

_IMO_PATTERN = re.compile(r"^[0-9]{7}$")


def is_valid_imo(imo: str) -> bool:
    """
    Check a 7-digit IMO number against its check digit.

    The first six digits are weighted 7 down to 2; the last digit of the
    weighted sum must equal the seventh digit. For example 9074729:
    9*7 + 0*6 + 7*5 + 4*4 + 7*3 + 2*2 = 139, check digit 9.
    """
    if imo is None:
        return False
    imo = str(imo).strip()
    if not _IMO_PATTERN.match(imo):
        return False

    digits = [int(c) for c in imo]
    total = sum(digit * weight for digit, weight in zip(digits[:6], range(7, 1, -1)))
    return total % 10 == digits[6]
