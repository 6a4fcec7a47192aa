"""RUT normalizer: Chilean tax identifier.

A RUT is a digit body followed by a single check character (``0``–``9``
or ``K``) computed with a weighted modulus-11 algorithm.  Users type it
in many shapes: ``12.345.678-5``, ``12345678-5``, ``123456785``.

Three functions cover every caller:

* ``clean_rut``: storage form, no punctuation (``"123456785"``).
* ``validate_rut``: checksum verification, returns ``bool``.
* ``format_rut``: display form (``"12.345.678-5"``).

None of them raise on malformed input.  A ``False`` result or an
unchanged passthrough string is the only failure signal.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_PUNCTUATION = str.maketrans("", "", ".-")
_CHECK_CHARS = frozenset("0123456789K")


def clean_rut(raw: str) -> str:
    """Return *raw* without ``.`` / ``-``, uppercased so ``k`` becomes ``K``.

    No other filtering is done: invalid characters are handed back so
    that ``validate_rut`` can reject them.
    """
    return raw.translate(_PUNCTUATION).upper()


def compute_check_digit(body: str) -> str | None:
    """Return the expected check character for a digit *body*.

    Returns ``None`` when *body* is empty or contains non-digits.
    """
    if not body or not body.isdigit() or not body.isascii():
        return None

    total = 0
    for index, digit in enumerate(reversed(body)):
        total += int(digit) * (2 + index % 6)

    remainder = 11 - total % 11
    if remainder == 11:
        return "0"
    if remainder == 10:
        return "K"
    return str(remainder)


def validate_rut(raw: str) -> bool:
    """Return ``True`` if *raw* carries a correct modulus-11 check character.

    Accepts formatted and bare input alike.  Never raises.
    """
    cleaned = clean_rut(raw)
    if len(cleaned) < 2:
        return False

    body, check = cleaned[:-1], cleaned[-1]
    if check not in _CHECK_CHARS:
        logger.debug("validate_rut: bad check character (length=%d)", len(cleaned))
        return False

    expected = compute_check_digit(body)
    if expected is None:
        logger.debug("validate_rut: non-digit body (length=%d)", len(cleaned))
        return False

    return expected == check


def format_rut(raw: str) -> str:
    """Return *raw* in display form, e.g. ``"12.345.678-5"``.

    The check character is not verified; a well-formed but wrong RUT
    still formats.  Input shorter than two characters after cleaning is
    returned in its cleaned form.  A body containing non-digits is
    grouped as-is, characters are never dropped.
    """
    cleaned = clean_rut(raw)
    if len(cleaned) < 2:
        return cleaned

    body, check = cleaned[:-1], cleaned[-1]

    groups: list[str] = []
    while len(body) > 3:
        groups.insert(0, body[-3:])
        body = body[:-3]
    groups.insert(0, body)

    return f"{'.'.join(groups)}-{check}"
