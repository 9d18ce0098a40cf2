# backend/routers/stats.py

import os
from fastapi import APIRouter, HTTPException
from models.stats_models import RankedEntry, ShareEntry
from services.aggregator import (
    check_field,
    frequency_by_field,
    group_cardinality,
    most_common,
    share_breakdown,
    top_n,
    unique_count,
)
from services.presenters.artist_presenter import present_artist_stats
from services.stats_engine import compute_catalog_summary
from utils import song_store

DEFAULT_TOP_N = int(os.getenv("STATS_TOP_N", "5"))

router = APIRouter(prefix="/stats", tags=["Stats"])


def _field(field: str) -> str:
    try:
        return check_field(field)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _limit(n: int) -> int:
    if n < 0:
        raise HTTPException(status_code=400, detail="n must not be negative")
    return n


@router.get("/")
def stats():
    """
    Catalog summary plus the genre/album/artist detail breakdowns.
    """
    return compute_catalog_summary(song_store.list_songs())


@router.get("/frequency/{field}")
def frequency(field: str):
    table = frequency_by_field(song_store.list_songs(), _field(field))
    return {
        "field": field,
        "counts": table,
        "most_common": most_common(table),
    }


@router.get("/unique/{field}")
def unique(field: str):
    return {
        "field": field,
        "unique": unique_count(song_store.list_songs(), _field(field)),
    }


@router.get("/top/{field}")
def top(field: str, n: int = DEFAULT_TOP_N):
    table = frequency_by_field(song_store.list_songs(), _field(field))
    ranked = top_n(table, _limit(n))
    return {
        "field": field,
        "n": n,
        "entries": [
            RankedEntry(value=value, count=count).model_dump()
            for value, count in ranked
        ],
    }


@router.get("/shares/{field}")
def shares(field: str, n: int = DEFAULT_TOP_N):
    songs = song_store.list_songs()
    table = frequency_by_field(songs, _field(field))
    breakdown = share_breakdown(table, len(songs), _limit(n))
    return {
        "field": field,
        "total": len(songs),
        "entries": [
            ShareEntry(value=value, count=count, share=share).model_dump()
            for value, count, share in breakdown
        ],
    }


@router.get("/groups")
def groups(group: str = "Artist", member: str = "Album"):
    """
    Distinct `member` values per `group` value, e.g. albums per artist.
    """
    return {
        "group": group,
        "member": member,
        "counts": group_cardinality(song_store.list_songs(), _field(group), _field(member)),
    }


@router.get("/artists")
def artists():
    return present_artist_stats(song_store.list_songs())
