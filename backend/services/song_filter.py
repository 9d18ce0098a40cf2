# backend/services/song_filter.py

from typing import List, Optional

from models.song_models import Song
from services.aggregator import check_field


def filter_songs(songs: List[Song], field: str, text: Optional[str]) -> List[Song]:
    """
    Case-insensitive substring match on one field. Empty text keeps everything.
    """
    check_field(field)
    if not text:
        return list(songs)

    needle = text.lower()
    return [song for song in songs if needle in getattr(song, field).lower()]
