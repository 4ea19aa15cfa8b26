"""Summary and AI insight routes."""

from fastapi import APIRouter, Request

from ...services.series import compute_metrics, normalize
from ...services.trend_advisor import AssessmentSlot

router = APIRouter(tags=["insights"])


def get_slot(request: Request) -> AssessmentSlot:
    """Get the assessment slot from app state."""
    return request.app.state.assessments


@router.get("/summary")
async def summary(request: Request):
    """Current weight, total change and the latest assessment."""
    records = request.app.state.store.all()
    metrics = compute_metrics(normalize(records))
    latest = get_slot(request).latest
    return {
        "count": len(records),
        "current_value": metrics.current_value,
        "starting_value": metrics.starting_value,
        "net_change": metrics.net_change,
        "assessment": latest.to_dict() if latest else None,
    }


@router.get("/insights")
async def latest_insight(request: Request):
    """Get the most recent assessment, if any."""
    latest = get_slot(request).latest
    return {"assessment": latest.to_dict() if latest else None}


@router.post("/insights/analyze")
async def analyze(request: Request):
    """Run the trend advisor and keep its result."""
    records = request.app.state.store.all()
    result = await get_slot(request).refresh(records)
    return {"assessment": result.to_dict()}
