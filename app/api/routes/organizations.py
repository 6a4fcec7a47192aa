"""Request validation for organization and customer payloads.

POST /organizations/validate: RUT required, slug derived from the name
POST /customers/validate: RUT optional

The RUT field validators reject a bad check digit with HTTP 422 and
hand back the cleaned form, which is what gets stored.  Uniqueness
against the database is the caller's concern.
"""
from __future__ import annotations

import logging
import re

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from app.normalization.rut_normalizer import clean_rut, format_rut, validate_rut
from app.normalization.slug_normalizer import generate_unique_slug

logger = logging.getLogger(__name__)

router = APIRouter(tags=["organizations"])

_EMAIL_RE = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9\-]+(?:\.[a-z0-9\-]+)*\.[a-z]{2,}$")


def _checked_rut(value: str) -> str:
    if not validate_rut(value):
        raise ValueError("invalid RUT")
    return clean_rut(value)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class OrganizationBody(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    rut: str
    existing_slugs: list[str] = Field(default_factory=list)

    @field_validator("rut")
    @classmethod
    def rut_must_be_valid(cls, value: str) -> str:
        return _checked_rut(value)


class CustomerBody(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    rut: str | None = None
    email: str | None = None

    @field_validator("rut")
    @classmethod
    def rut_must_be_valid(cls, value: str | None) -> str | None:
        # Blank means "not provided", same as omitting the field
        if value is None or not value.strip():
            return None
        return _checked_rut(value)

    @field_validator("email")
    @classmethod
    def email_lowercased(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip().lower()
        if not _EMAIL_RE.match(value):
            raise ValueError("invalid email")
        return value


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/organizations/validate", summary="Validate an organization payload")
def validate_organization(body: OrganizationBody) -> dict[str, str]:
    slug = generate_unique_slug(body.name, body.existing_slugs)
    logger.info("Organization payload accepted (slug=%s)", slug)
    return {
        "name": body.name,
        "rut": body.rut,
        "rut_display": format_rut(body.rut),
        "slug": slug,
    }


@router.post("/customers/validate", summary="Validate a customer payload")
def validate_customer(body: CustomerBody) -> dict[str, str | None]:
    return {
        "name": body.name,
        "rut": body.rut,
        "rut_display": format_rut(body.rut) if body.rut else None,
        "email": body.email,
    }
