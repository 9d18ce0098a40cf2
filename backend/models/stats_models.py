from pydantic import BaseModel
from typing import Dict, List, Optional


class RankedEntry(BaseModel):
    value: str
    count: int


class ShareEntry(BaseModel):
    value: str
    count: int
    share: float


class ArtistStats(BaseModel):
    artist: str
    songs: int
    albums: int


class CatalogSummary(BaseModel):
    total_songs: int
    unique_artists: int
    unique_albums: int
    unique_genres: int
    most_common_genre: str
    genre_counts: Dict[str, int]
    album_counts: Dict[str, int]
    artist_stats: List[ArtistStats]
    error: Optional[str] = None
