import sys
from pathlib import Path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest
from fastapi.testclient import TestClient

from utils import song_store


@pytest.fixture(autouse=True)
def empty_store():
    song_store.reset_store()
    yield
    song_store.reset_store()


@pytest.fixture
def client():
    import main
    return TestClient(main.app)


@pytest.fixture
def scenario_songs():
    return [
        {"Title": "A", "Artist": "Q", "Album": "X", "Genre": "Rock"},
        {"Title": "B", "Artist": "Q", "Album": "Y", "Genre": "Rock"},
        {"Title": "C", "Artist": "Z", "Album": "X", "Genre": "Pop"},
    ]
