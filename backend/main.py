# backend/main.py

import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.songs import router as songs_router
from routers.stats import router as stats_router
from routers.visuals import router as visuals_router
from routers.upload import router as upload_router
from utils import song_store

# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------

app = FastAPI(title="Song Catalog API", version="0.1.0")

# Read allowed origins from environment
allowed_origins = os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
print("🚀 Allowed CORS origins:", allowed_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------
# CATALOG BOOTSTRAP
# ---------------------------------------------------------

def bootstrap_catalog() -> None:
    if song_store.DATA_FILE:
        song_store.load_store()

    seed_count = os.getenv("SONGS_SEED_MOCK")
    if not seed_count:
        return
    try:
        count = int(seed_count)
    except ValueError:
        print(f"⚠️ SONGS_SEED_MOCK must be a whole number, got {seed_count!r}. Skipping seed.")
        return
    song_store.seed_mock_songs(count)


bootstrap_catalog()

# ---------------------------------------------------------
# ROUTERS
# ---------------------------------------------------------

app.include_router(songs_router)
app.include_router(stats_router)
app.include_router(visuals_router)
app.include_router(upload_router)


@app.get("/")
def root():
    return {"message": "Song Catalog API running."}
