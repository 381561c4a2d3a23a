"""FastAPI server exposing closet versatility and capsule compatibility endpoints."""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from logic.validation import CapsulePayload, GarmentPayload, VersatilityRangeFilter
from wardrobe_app.app import ClosetScoringApp
from wardrobe_app.logging_config import configure_logging

scoring_app = ClosetScoringApp()
configure_logging(scoring_app.config.log_level)
app = FastAPI(title="Closet Versatility", version="0.1.0")


class ScoreItemRequest(BaseModel):
    """Score one garment against the closet it belongs to."""

    item: GarmentPayload
    closet: List[GarmentPayload] = Field(default_factory=list)


class ClosetRequest(BaseModel):
    """Closet payload for ranking requests."""

    closet: List[GarmentPayload] = Field(default_factory=list)
    closet_id: Optional[str] = Field(None, description="Stable closet key used for score caching")
    limit: Optional[int] = Field(None, ge=0)


class ClosetStatsRequest(BaseModel):
    closet: List[GarmentPayload] = Field(default_factory=list)
    closet_id: Optional[str] = None
    versatility: VersatilityRangeFilter = Field(default_factory=VersatilityRangeFilter)


class CompatibilityLookupRequest(BaseModel):
    capsule: CapsulePayload
    item1_id: str = Field(..., min_length=1)
    item2_id: str = Field(..., min_length=1)


class CapsuleSummaryRequest(BaseModel):
    capsule: CapsulePayload
    threshold: Optional[int] = Field(None, ge=0, le=100)
    limit: Optional[int] = Field(None, ge=0)


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": scoring_app.config.service_name,
        "environment": scoring_app.config.environment or "local",
    }


@app.post("/versatility/score")
async def score_item(request: ScoreItemRequest) -> dict:
    closet = [garment.to_model() for garment in request.closet]
    return scoring_app.score_item(request.item.to_model(), closet)


@app.post("/versatility/top")
async def top_versatile(request: ClosetRequest) -> dict:
    closet = [garment.to_model() for garment in request.closet]
    ranked = scoring_app.top_versatile_items(closet, limit=request.limit, closet_id=request.closet_id)
    return {"items": [entry.to_dict() for entry in ranked]}


@app.post("/closet/stats")
async def closet_stats(request: ClosetStatsRequest) -> dict:
    closet = [garment.to_model() for garment in request.closet]
    try:
        return scoring_app.closet_stats(
            closet,
            closet_id=request.closet_id,
            minimum=request.versatility.min,
            maximum=request.versatility.max,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.delete("/closet/{closet_id}/cache")
async def invalidate_closet(closet_id: str) -> dict:
    """Drop memoised scores after the closet changes upstream."""

    return {"closet_id": closet_id, "invalidated": scoring_app.invalidate_closet(closet_id)}


@app.post("/capsule/compatibility")
async def compatibility_lookup(request: CompatibilityLookupRequest) -> dict:
    return scoring_app.compatibility_lookup(request.capsule.to_model(), request.item1_id, request.item2_id)


@app.post("/capsule/summary")
async def capsule_summary(request: CapsuleSummaryRequest) -> dict:
    return scoring_app.capsule_summary(
        request.capsule.to_model(), threshold=request.threshold, limit=request.limit
    )


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
