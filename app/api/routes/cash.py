"""Cash rounding routes used by the POS payment dialog and register close.

POST /cash/round: round one cash total
POST /cash/totals: sum cash totals, each rounded first
"""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.core.settings import get_settings
from app.normalization.cash_rounding import round_cash_payment_amount, sum_rounded_cash_totals

router = APIRouter(prefix="/cash", tags=["cash"])


class RoundBody(BaseModel):
    amount: float = Field(allow_inf_nan=False)


class TotalsBody(BaseModel):
    totals: list[Annotated[float, Field(allow_inf_nan=False)]]


@router.post("/round", summary="Round a cash payment")
def round_amount(body: RoundBody) -> dict[str, float | int]:
    unit = get_settings().cash_rounding_unit
    return {
        "amount": body.amount,
        "rounded": round_cash_payment_amount(body.amount, unit),
    }


@router.post("/totals", summary="Sum rounded cash totals")
def sum_totals(body: TotalsBody) -> dict[str, int]:
    unit = get_settings().cash_rounding_unit
    return {"total": sum_rounded_cash_totals(body.totals, unit)}
