# backend/routers/upload.py

from fastapi import APIRouter, UploadFile, File, HTTPException
from fastapi.concurrency import run_in_threadpool
from models.song_models import SongIn
from services.csv_parser import parse_csv
from services.song_validation import validate_song
from utils import song_store

router = APIRouter(prefix="/upload", tags=["Upload"])

UPLOAD_MODES = ("append", "replace")


@router.post("/")
async def upload_csv(file: UploadFile = File(...), mode: str = "append"):
    """
    Accepts a CSV with Title, Artist, Album, Genre columns.
    Valid rows are added to the catalog, invalid rows are reported back.
      - mode=append   keep the current catalog (default)
      - mode=replace  the valid rows become the whole catalog
    Does NOT return raw data.
    """
    if mode not in UPLOAD_MODES:
        raise HTTPException(status_code=400, detail=f"Unknown upload mode '{mode}'")

    rows = await parse_csv(file)

    batch = []
    rejected = []
    for line, row in enumerate(rows, start=2):  # line 1 is the header
        errors = validate_song(row)
        if errors:
            rejected.append({"row": line, "errors": errors})
            continue
        batch.append(SongIn(**{name: row[name] for name in SongIn.model_fields}))

    if rejected:
        print(f"⚠️ CSV upload rejected {len(rejected)} of {len(rows)} rows")

    # One write for the whole file, off the event loop
    store = song_store.replace_all if mode == "replace" else song_store.insert_songs
    try:
        added = await run_in_threadpool(store, batch)
    except song_store.SongStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "status": "ok",
        "message": f"CSV uploaded. Added {len(added)} songs.",
        "mode": mode,
        "added": len(added),
        "rejected": rejected,
    }
