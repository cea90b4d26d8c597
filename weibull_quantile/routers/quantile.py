from __future__ import annotations

from fastapi import APIRouter, HTTPException

from weibull_quantile.models.quantile import QuantileRequest, QuantileResponse
from weibull_quantile.quantile_service import quantile_service
from weibull_quantile.transformers.base import QuantileError
from weibull_quantile.utils.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/quantile/kinds")
def list_kinds():
    return quantile_service.get_all_kinds()


@router.post("/quantile", response_model=QuantileResponse)
def evaluate_quantile(req: QuantileRequest):
    try:
        result = quantile_service.apply(req.to_input(), req.to_options())
    except QuantileError as e:
        logger.warning("quantile request rejected: %s", e.message)
        raise HTTPException(status_code=400, detail=e.to_dict())

    return QuantileResponse.from_result(result)
