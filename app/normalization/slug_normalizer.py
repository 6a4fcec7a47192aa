"""Slug normalizer: organization names to URL-safe slugs.

``"Almacén Ñuñoa Ltda."`` becomes ``"almacen-nunoa-ltda"``.

Rules applied in order
----------------------
1. Lowercase and strip.
2. NFD-decompose and drop combining marks (``é`` → ``e``, ``ñ`` → ``n``).
3. Whitespace runs and underscores become ``-``.
4. Anything other than ASCII letters, digits and ``-`` is removed.
5. Runs of ``-`` collapse to one; leading / trailing ``-`` are trimmed.
"""
from __future__ import annotations

import logging
import re
import time
import unicodedata
from collections.abc import Iterable

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"[\s_]+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9\-]+")
_DASHES_RE = re.compile(r"-{2,}")

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits: list[str] = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def slugify(text: str) -> str:
    """Return *text* as a lowercase, dash-separated ASCII slug.

    Returns ``""`` when nothing slug-worthy is left.
    """
    slug = text.lower().strip()
    slug = unicodedata.normalize("NFD", slug)
    slug = "".join(ch for ch in slug if not unicodedata.combining(ch))
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _DISALLOWED_RE.sub("", slug)
    slug = _DASHES_RE.sub("-", slug)
    return slug.strip("-")


def generate_unique_slug(text: str, existing_slugs: Iterable[str] = ()) -> str:
    """Return ``slugify(text)``, suffixed with a base-36 timestamp on collision.

    Parameters
    ----------
    text:
        Source text, usually an organization name.
    existing_slugs:
        Slugs already taken.  Only an exact match counts as a collision.
    """
    slug = slugify(text)
    taken = set(existing_slugs)

    if slug in taken:
        suffix = _to_base36(int(time.time() * 1000))
        candidate = f"{slug}-{suffix}"
        # Two calls inside the same millisecond would collide again
        while candidate in taken:
            suffix = _to_base36(int(suffix, 36) + 1)
            candidate = f"{slug}-{suffix}"
        logger.debug("generate_unique_slug: collision resolved with suffix")
        slug = candidate

    return slug
