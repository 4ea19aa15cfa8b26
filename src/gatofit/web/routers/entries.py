"""Weight record routes."""

from datetime import date, datetime

from fastapi import APIRouter, BackgroundTasks, Form, Request, Response
from fastapi.responses import JSONResponse

from ...models.weight import NewWeightRecord, TimeWindow, WeightRecord
from ...services.entry_store import EntryStore
from ...services.series import chart_bounds, history, normalize, project

router = APIRouter(tags=["entries"])


def get_store(request: Request) -> EntryStore:
    """Get the entry store from app state."""
    return request.app.state.store


@router.get("/entries")
async def list_entries(request: Request):
    """List records newest first, with the change from the previous one."""
    store = get_store(request)
    items = []
    for record, trend in history(normalize(store.all())):
        item = record.to_dict()
        item["trend"] = trend.to_dict() if trend else None
        items.append(item)
    return {"entries": items, "count": len(items)}


@router.post("/entries")
async def add_entry(
    request: Request,
    background_tasks: BackgroundTasks,
    weight: str = Form(""),
    date_value: str | None = Form(None, alias="date"),
    note: str | None = Form(None),
):
    """Record a new weight measurement."""
    try:
        entry = NewWeightRecord.from_input(date_value or date.today().isoformat(), weight, note)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    record = WeightRecord.create(entry)
    store = get_store(request)
    await store.insert(record)
    records = store.all()

    slot = request.app.state.assessments
    if slot.should_auto_analyze(len(records)):
        background_tasks.add_task(slot.refresh, records)

    return JSONResponse(record.to_dict(), status_code=201, background=background_tasks)


@router.delete("/entries/{record_id}")
async def delete_entry(request: Request, record_id: str):
    """Delete a record. Unknown ids are ignored."""
    await get_store(request).remove(record_id)
    return Response(status_code=204)


@router.get("/chart")
async def chart_data(request: Request, window: TimeWindow = TimeWindow.ALL):
    """Get the records inside a time window with y-axis bounds."""
    ordered = normalize(get_store(request).all())
    points = project(ordered, window, datetime.now())
    bounds = chart_bounds(points)
    return {
        "window": window.value,
        "points": [r.to_dict() for r in points],
        "bounds": list(bounds) if bounds else None,
    }
