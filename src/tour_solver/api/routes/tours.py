"""Tour solving endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.tours import TourRequest, TourResponse
from ...services.tours.service import solve_request

router = APIRouter(prefix="/tours", tags=["tours"])


@router.post("/solve", response_model=TourResponse, status_code=status.HTTP_200_OK)
def solve(payload: TourRequest) -> TourResponse:
    try:
        return solve_request(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error solving tour: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to solve tour: {str(exc)}"
        ) from exc
