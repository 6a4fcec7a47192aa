"""RUT helper routes used by form components for inline feedback.

POST /rut/clean: storage form
POST /rut/validate: checksum verdict plus clean and display forms
POST /rut/format: display form

Every route answers 200 for any string; ``valid: false`` is the failure
signal, never an HTTP error.
"""
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from app.normalization.rut_normalizer import clean_rut, format_rut, validate_rut

router = APIRouter(prefix="/rut", tags=["rut"])


class RutBody(BaseModel):
    value: str


@router.post("/clean", summary="Strip RUT punctuation")
def clean(body: RutBody) -> dict[str, str]:
    return {"cleaned": clean_rut(body.value)}


@router.post("/validate", summary="Verify the RUT check digit")
def validate(body: RutBody) -> dict[str, object]:
    return {
        "valid": validate_rut(body.value),
        "cleaned": clean_rut(body.value),
        "formatted": format_rut(body.value),
    }


@router.post("/format", summary="Format a RUT for display")
def format_(body: RutBody) -> dict[str, str]:
    return {"formatted": format_rut(body.value)}
