"""Tour request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class PointModel(BaseModel):
    x: float
    y: float


class TourRequest(BaseModel):
    points: List[PointModel] = Field(..., description="Points to visit; every ordering is evaluated.")
    report_improvements: Optional[bool] = Field(
        default=None,
        description="Log each improvement while enumerating. Defaults to the server setting.",
    )


class TourResponse(BaseModel):
    distance: float = Field(..., description="Length of the closed tour, including the edge back to the start.")
    route: List[PointModel]
    point_count: int
    evaluated: int = Field(..., description="Number of orderings scored.")
    elapsed_seconds: float
