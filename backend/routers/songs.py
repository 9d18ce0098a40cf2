# backend/routers/songs.py

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, HTTPException
from models.song_models import Song, SongIn, SongValidation
from services.song_filter import filter_songs
from services.song_validation import validate_song
from utils import song_store

router = APIRouter(prefix="/songs", tags=["Songs"])


def _checked_song(payload: Dict[str, Any]) -> SongIn:
    errors = validate_song(payload)
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})
    return SongIn(**{name: str(payload[name]).strip() for name in SongIn.model_fields})


@router.get("/", response_model=List[Song])
def list_songs(field: str = "Title", q: Optional[str] = None):
    """
    All songs, optionally narrowed by a case-insensitive search on one field:
      - field=Artist&q=queen
    """
    try:
        return filter_songs(song_store.list_songs(), field, q)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/validate", response_model=SongValidation)
def validate(payload: Dict[str, Any] = Body(...)):
    """
    Form-side validation only. Nothing is stored.
    """
    errors = validate_song(payload)
    return SongValidation(valid=not errors, errors=errors)


@router.get("/{song_id}", response_model=Song)
def get_song(song_id: str):
    song = song_store.get_song(song_id)
    if song is None:
        raise HTTPException(status_code=404, detail=f"Song {song_id} not found")
    return song


@router.post("/", response_model=Song)
def add_song(payload: Dict[str, Any] = Body(...)):
    data = _checked_song(payload)
    try:
        song = song_store.insert_song(data)
    except song_store.SongStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    print(f"➕ Added song {song.id}: {song.Title} by {song.Artist}")
    return song


@router.put("/{song_id}", response_model=Song)
def update_song(song_id: str, payload: Dict[str, Any] = Body(...)):
    data = _checked_song(payload)
    try:
        song = song_store.replace_song(song_id, data)
    except song_store.SongStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if song is None:
        raise HTTPException(status_code=404, detail=f"Song {song_id} not found")
    return song


@router.delete("/{song_id}")
def delete_song(song_id: str):
    # Removing an unknown id is a no-op, same acknowledgement either way
    try:
        song_store.remove_song(song_id)
    except song_store.SongStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Song deleted", "id": song_id}
