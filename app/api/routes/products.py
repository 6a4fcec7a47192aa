"""Product code routes.

POST /products/sku/normalize: lookup key for a scanned or typed code
POST /products/sku/generate: fresh random SKU
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.core.settings import get_settings
from app.normalization.sku_normalizer import (
    detect_barcode_format,
    generate_random_sku,
    normalize_sku,
)

router = APIRouter(prefix="/products/sku", tags=["products"])


class SkuBody(BaseModel):
    sku: str


@router.post("/normalize", summary="Normalize a SKU or barcode")
def normalize(body: SkuBody) -> dict[str, object]:
    sku = normalize_sku(body.sku)
    if not sku:
        raise HTTPException(status_code=400, detail="SKU is required")

    barcode_format = detect_barcode_format(sku)
    return {
        "sku": sku,
        "is_barcode": barcode_format is not None,
        "barcode_format": barcode_format,
    }


@router.post("/generate", summary="Generate a random SKU")
def generate() -> dict[str, str]:
    return {"sku": generate_random_sku(get_settings().sku_prefix)}
