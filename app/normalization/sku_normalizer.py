"""SKU / barcode normalizer.

Product codes arrive from scanners and from hand-typed forms.  Scanners
produce clean digit runs; people add spaces, dashes and lowercase
letters.  ``normalize_sku`` collapses both to one lookup key.

Safety rule: none needed, SKUs are not PII.
"""
from __future__ import annotations

import logging
import random
import re
import string
import time

logger = logging.getLogger(__name__)

_STRIP_RE = re.compile(r"[\s\-]")

# Ordered most-specific first; CODE128 is a catch-all for alphanumerics.
_BARCODE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("EAN-13", re.compile(r"^\d{13}$")),
    ("UPC-A", re.compile(r"^\d{12}$")),
    ("EAN-8", re.compile(r"^\d{8}$")),
    ("CODE128", re.compile(r"^[A-Z0-9]{6,20}$")),
)

_BASE36_UPPER = string.digits + string.ascii_uppercase


def normalize_sku(raw: str) -> str:
    """Return *raw* stripped of whitespace and dashes, uppercased."""
    return _STRIP_RE.sub("", raw.strip()).upper()


def detect_barcode_format(raw: str) -> str | None:
    """Return the barcode family *raw* looks like, or ``None``."""
    clean = raw.strip()
    for name, pattern in _BARCODE_PATTERNS:
        if pattern.match(clean):
            return name
    return None


def is_likely_barcode(raw: str) -> bool:
    """Return ``True`` if *raw* looks like a commercial barcode.

    Recognises EAN-13, UPC-A, EAN-8 and CODE128-style codes (6–20
    uppercase alphanumerics).  Lowercase input is not a barcode; run it
    through ``normalize_sku`` first if that is wanted.
    """
    return detect_barcode_format(raw) is not None


def generate_random_sku(prefix: str = "PROD") -> str:
    """Return a fresh SKU such as ``PROD-1676543210123-X7K9``.

    Uniqueness inside an organization is the caller's job; the
    millisecond timestamp makes collisions unlikely but not impossible.
    """
    timestamp = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36_UPPER, k=4))
    sku = f"{prefix}-{timestamp}-{suffix}"
    logger.debug("generate_random_sku: generated sku=%s", sku)
    return sku
