from pydantic import BaseModel
from typing import List, Optional

class VisualData(BaseModel):
    field: str
    total: int
    labels: List[str]
    counts: List[int]
    shares: List[float]
    error: Optional[str] = None
