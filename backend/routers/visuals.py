# backend/routers/visuals.py

from fastapi import APIRouter, HTTPException
from routers.stats import DEFAULT_TOP_N
from services.aggregator import check_field
from services.visuals_engine import build_visuals
from utils import song_store

router = APIRouter(prefix="/visuals", tags=["Visuals"])


@router.get("/{field}")
def visuals(field: str, n: int = DEFAULT_TOP_N):
    """
    Returns chart-ready arrays (labels, counts, shares) for one field.
    The top `n` values are shown, the rest fold into "Other".
    """
    try:
        check_field(field)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if n < 0:
        raise HTTPException(status_code=400, detail="n must not be negative")

    return build_visuals(song_store.list_songs(), field, n)
