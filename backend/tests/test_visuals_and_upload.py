from models.song_models import SongIn
from utils import song_store

CSV_BODY = (
    "Title,Artist,Album,Genre\n"
    "Imagine,John Lennon,Imagine,Pop\n"
    "Song#1,Someone,Somewhere,Rock\n"
    "Come Together,The Beatles,Abbey Road,Rock\n"
)


def test_visuals_empty(client):
    assert client.get("/visuals/Genre").json() == {"error": "No songs in catalog"}


def test_visuals_shapes(client):
    for genre in ["Rock", "Rock", "Pop", "Jazz"]:
        song_store.insert_song(SongIn(Title="T", Artist="A", Album="B", Genre=genre))

    data = client.get("/visuals/Genre", params={"n": 1}).json()
    assert data["field"] == "Genre"
    assert data["total"] == 4
    assert data["labels"] == ["Rock", "Other"]
    assert data["counts"] == [2, 2]
    assert data["shares"] == [0.5, 0.5]


def test_visuals_bad_field(client):
    assert client.get("/visuals/Year").status_code == 400


def test_upload_adds_valid_rows_and_reports_rejects(client):
    resp = client.post(
        "/upload/",
        files={"file": ("songs.csv", CSV_BODY.encode("utf-8"), "text/csv")},
    )
    data = resp.json()

    assert data["added"] == 2
    assert data["rejected"] == [
        {"row": 3, "errors": {"Title": "Title can only contain letters, numbers, and spaces"}}
    ]
    assert [s.Title for s in song_store.list_songs()] == ["Imagine", "Come Together"]


def test_upload_saves_whole_file_once(client, monkeypatch):
    calls = []
    monkeypatch.setattr(song_store, "save_store", lambda songs: calls.append(len(songs)))

    client.post("/upload/", files={"file": ("songs.csv", CSV_BODY.encode("utf-8"), "text/csv")})

    assert calls == [2]


def test_upload_replace_mode(client):
    song_store.insert_song(SongIn(Title="Old", Artist="A", Album="B", Genre="Rock"))

    resp = client.post(
        "/upload/",
        params={"mode": "replace"},
        files={"file": ("songs.csv", CSV_BODY.encode("utf-8"), "text/csv")},
    )

    assert resp.json()["mode"] == "replace"
    assert [s.Title for s in song_store.list_songs()] == ["Imagine", "Come Together"]


def test_upload_unknown_mode(client):
    resp = client.post(
        "/upload/",
        params={"mode": "merge"},
        files={"file": ("songs.csv", CSV_BODY.encode("utf-8"), "text/csv")},
    )
    assert resp.status_code == 400
