# backend/utils/song_store.py

import json
import os
import secrets
import threading
from pathlib import Path
from typing import List, Optional

from models.song_models import Song, SongIn

DATA_FILE = os.getenv("SONGS_DATA_FILE")

_SONGS: List[Song] = []
_LOCK = threading.Lock()


class SongStoreError(Exception):
    """Raised when the catalog could not be written to `SONGS_DATA_FILE`."""


# ---------------------------------------------------------
# MOCK CATALOG
# ---------------------------------------------------------

GENRES = ["Rock", "Pop", "Jazz", "Electronic", "Classical", "Hip Hop", "Indie"]
ARTISTS = [
    "Queen", "The Beatles", "Nirvana", "Michael Jackson",
    "Led Zeppelin", "Daft Punk", "Mozart", "Taylor Swift",
]
ALBUMS = [
    "A Night at the Opera", "Abbey Road", "Nevermind", "Thriller",
    "IV", "Discovery", "Requiem", "1989",
]

CLASSIC_SONGS = [
    SongIn(Title="Bohemian Rhapsody", Artist="Queen", Album="A Night at the Opera", Genre="Rock"),
    SongIn(Title="Imagine", Artist="John Lennon", Album="Imagine", Genre="Pop"),
    SongIn(Title="Smells Like Teen Spirit", Artist="Nirvana", Album="Nevermind", Genre="Grunge"),
]


def generate_mock_songs(count: int) -> List[SongIn]:
    songs: List[SongIn] = []
    for i in range(1, count + 1):
        songs.append(SongIn(
            Title=f"Mock Track {i}",
            Artist=ARTISTS[(i // 10) % len(ARTISTS)],
            Album=ALBUMS[(i // 15) % len(ALBUMS)],
            Genre=GENRES[i % len(GENRES)],
        ))
    return songs


# ---------------------------------------------------------
# RECORD SET
# ---------------------------------------------------------
# Every change builds a candidate list, saves it, and only then swaps it
# into `_SONGS` in place, all under `_LOCK`. A failed save leaves the
# catalog exactly as it was.

def new_song_id() -> str:
    return secrets.token_hex(12)


def list_songs() -> List[Song]:
    """
    Snapshot of the catalog in insertion order.
    Callers get their own list, so later mutations never leak into it.
    """
    with _LOCK:
        return list(_SONGS)


def get_song(song_id: str) -> Optional[Song]:
    with _LOCK:
        for song in _SONGS:
            if song.id == song_id:
                return song
    return None


def _commit(candidate: List[Song]) -> None:
    save_store(candidate)
    _SONGS[:] = candidate


def insert_song(data: SongIn) -> Song:
    return insert_songs([data])[0]


def insert_songs(batch: List[SongIn]) -> List[Song]:
    """
    Append several songs with a single save.
    """
    songs = [Song(id=new_song_id(), **data.model_dump()) for data in batch]
    with _LOCK:
        _commit(_SONGS + songs)
    return songs


def replace_song(song_id: str, data: SongIn) -> Optional[Song]:
    """
    Swap the stored song for `data`, keeping its id and position.
    Returns None (and changes nothing) when the id is unknown.
    """
    with _LOCK:
        for index, song in enumerate(_SONGS):
            if song.id == song_id:
                updated = Song(id=song_id, **data.model_dump())
                candidate = list(_SONGS)
                candidate[index] = updated
                _commit(candidate)
                return updated
    return None


def remove_song(song_id: str) -> bool:
    with _LOCK:
        candidate = [song for song in _SONGS if song.id != song_id]
        if len(candidate) == len(_SONGS):
            return False
        _commit(candidate)
    return True


def replace_all(batch: List[SongIn]) -> List[Song]:
    """
    Drop the whole catalog and store `batch` in its place, with one save.
    """
    songs = [Song(id=new_song_id(), **data.model_dump()) for data in batch]
    with _LOCK:
        _commit(songs)
    return songs


def reset_store() -> None:
    with _LOCK:
        _SONGS.clear()


# ---------------------------------------------------------
# OPTIONAL JSON PERSISTENCE
# ---------------------------------------------------------

def save_store(songs: List[Song]) -> None:
    if not DATA_FILE:
        return
    payload = [song.model_dump(by_alias=True) for song in songs]
    try:
        Path(DATA_FILE).write_text(json.dumps(payload, indent=2))
    except OSError as e:
        print(f"❌ Could not save song data file {DATA_FILE}: {e}")
        raise SongStoreError(f"Could not save song catalog: {e}") from e


def load_store(path: Optional[str] = None) -> int:
    """
    Load songs from a JSON file written by `save_store`.
    A missing or unreadable file leaves the catalog empty.
    """
    path = path or DATA_FILE
    if not path:
        return 0

    songs: List[Song] = []
    try:
        with open(path, "r") as f:
            rows = json.load(f)
        songs = [Song.model_validate(row) for row in rows]
    except FileNotFoundError:
        print(f"⚠️ No song data file at {path}, starting with an empty catalog")
    except (ValueError, TypeError) as e:
        print(f"⚠️ Could not read song data file {path}: {e}")

    with _LOCK:
        _SONGS[:] = songs

    print(f"🎵 Loaded {len(songs)} songs from {path}")
    return len(songs)


def seed_mock_songs(count: int) -> int:
    songs = [
        Song(id=new_song_id(), **data.model_dump())
        for data in CLASSIC_SONGS + generate_mock_songs(count)
    ]
    with _LOCK:
        if _SONGS:
            return 0
        _commit(songs)
    print(f"🌱 Seeded catalog with {len(songs)} songs")
    return len(songs)
