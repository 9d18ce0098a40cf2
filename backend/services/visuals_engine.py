# backend/services/visuals_engine.py

from typing import Dict, Any, List
from models.song_models import Song
from models.visuals_models import VisualData
from services.aggregator import frequency_by_field, share_breakdown


def build_visuals(songs: List[Song], field: str, n: int) -> Dict[str, Any]:
    """
    Converts the catalog into chart-ready arrays for one field.
    Always returns a dict with either:
      - { "field", "total", "labels", "counts", "shares" }
      - { "error": "message" }
    Colours and slice angles are left to the frontend.
    """

    if not songs:
        return {"error": "No songs in catalog"}

    table = frequency_by_field(songs, field)
    breakdown = share_breakdown(table, len(songs), n)

    labels: List[str] = [value for value, _, _ in breakdown]
    counts: List[int] = [count for _, count, _ in breakdown]
    shares: List[float] = [round(share, 4) for _, _, share in breakdown]

    visual = VisualData(
        field=field,
        total=len(songs),
        labels=labels,
        counts=counts,
        shares=shares,
    )
    return visual.model_dump(exclude_none=True)
