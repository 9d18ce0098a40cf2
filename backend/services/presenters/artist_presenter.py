import pandas as pd
import numpy as np

from typing import Any, Dict, List
from models.song_models import Song


ARTIST_COLUMNS = ["artist", "songs", "albums", "share_pct"]


def present_artist_stats(songs: List[Song]) -> List[Dict[str, Any]]:
    """
    Per-artist table for the detail report:
    - songs: number of songs by the artist
    - albums: distinct albums by the artist
    - share_pct: artist's songs as a percentage of the catalog
    Sorted by song count, first appearance breaks ties.
    """

    if not songs:
        return []

    df = pd.DataFrame([song.model_dump() for song in songs])

    # sort=False keeps artists in first-appearance order
    grouped = df.groupby("Artist", sort=False).agg(
        songs=("Title", "size"),
        albums=("Album", "nunique"),
    ).reset_index().rename(columns={"Artist": "artist"})

    total = grouped["songs"].sum()
    grouped["share_pct"] = grouped["songs"] / (total if total else np.nan) * 100
    grouped["share_pct"] = grouped["share_pct"].fillna(0).round(2)

    # mergesort is the stable option
    grouped = grouped.sort_values("songs", ascending=False, kind="mergesort")

    rows = grouped[ARTIST_COLUMNS].to_dict(orient="records")
    return [
        {
            "artist": str(row["artist"]),
            "songs": int(row["songs"]),
            "albums": int(row["albums"]),
            "share_pct": float(row["share_pct"]),
        }
        for row in rows
    ]
