# backend/services/stats_engine.py

from typing import Dict, Any, List
from models.song_models import Song
from models.stats_models import ArtistStats, CatalogSummary
from services.aggregator import (
    frequency_by_field,
    group_cardinality,
    most_common,
)


def compute_catalog_summary(songs: List[Song]) -> Dict[str, Any]:
    """
    Summary and detail figures for the catalog dashboard.
    An empty catalog still gets a full payload (zeros and the empty marker)
    with an `error` note, so the dashboard can always render.
    """
    genre_counts = frequency_by_field(songs, "Genre")
    album_counts = frequency_by_field(songs, "Album")
    artist_songs = frequency_by_field(songs, "Artist")
    artist_albums = group_cardinality(songs, "Artist", "Album")

    artist_stats: List[ArtistStats] = [
        ArtistStats(artist=artist, songs=count, albums=artist_albums[artist])
        for artist, count in artist_songs.items()
    ]

    summary = CatalogSummary(
        total_songs=len(songs),
        unique_artists=len(artist_songs),
        unique_albums=len(album_counts),
        unique_genres=len(genre_counts),
        most_common_genre=most_common(genre_counts),
        genre_counts=genre_counts,
        album_counts=album_counts,
        artist_stats=artist_stats,
        error=None if songs else "No songs in catalog",
    )

    return summary.model_dump()
