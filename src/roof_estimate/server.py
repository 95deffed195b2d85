"""FastAPI server for roof estimates."""

from __future__ import annotations

import csv
import io
import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from .config import settings
from .errors import InvalidInputError
from .estimate import estimate_roof
from .insights_reader import read_building_insights
from .models import BuildingInsights, RoofEstimate, SegmentPitch

logger = logging.getLogger(__name__)

app = FastAPI(title="Roof Estimate", version="0.1.0")


@app.post("/estimate")
async def estimate_from_body(
    insights: dict[str, Any] = Body(...),
    price_per_square: float | None = Query(None, ge=0),
    format: str = Query("json", pattern="^(csv|json)$"),
):
    """Estimate a roof from a building-insights JSON body.

    ``format=csv`` streams the per-segment pitch breakdown instead of the
    full estimate.
    """
    result = _estimate(insights, price_per_square)
    if format == "csv":
        return _segments_to_csv_response(result.segments)
    return result


@app.post("/estimate/upload")
async def estimate_from_upload(
    file: UploadFile,
    price_per_square: float | None = Query(None, ge=0),
    format: str = Query("json", pattern="^(csv|json)$"),
):
    """Estimate a roof from an uploaded building-insights JSON file."""
    content = await file.read()
    result = _estimate(content, price_per_square)
    if format == "csv":
        return _segments_to_csv_response(result.segments)
    return result


def _estimate(source: dict[str, Any] | bytes, price_per_square: float | None) -> RoofEstimate:
    """Run the engine, turning bad input into a 400."""
    price = settings.price_per_square if price_per_square is None else price_per_square
    try:
        insights: BuildingInsights = read_building_insights(source)
    except InvalidInputError as e:
        logger.warning("Rejected building insights: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return estimate_roof(insights.segments, price, insights.whole_roof_ground_area_sq_meters)


def _segments_to_csv_response(segments: list[SegmentPitch]) -> StreamingResponse:
    """Convert per-segment pitch rows to a streaming CSV response."""
    fieldnames = list(SegmentPitch.model_fields)

    def generate():
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=fieldnames)
        writer.writeheader()
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)

        for seg in segments:
            writer.writerow(seg.model_dump(mode="json"))
            yield buf.getvalue()
            buf.seek(0)
            buf.truncate(0)

    return StreamingResponse(
        generate(),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=roof_segments.csv"},
    )
