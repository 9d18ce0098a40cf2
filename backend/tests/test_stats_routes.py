from models.song_models import SongIn
from utils import song_store


def load(rows):
    for row in rows:
        song_store.insert_song(SongIn(**row))


def test_summary(client, scenario_songs):
    load(scenario_songs)
    data = client.get("/stats/").json()

    assert data["total_songs"] == 3
    assert data["unique_artists"] == 2
    assert data["unique_albums"] == 2
    assert data["most_common_genre"] == "Rock"
    assert data["genre_counts"] == {"Rock": 2, "Pop": 1}
    assert data["artist_stats"] == [
        {"artist": "Q", "songs": 2, "albums": 2},
        {"artist": "Z", "songs": 1, "albums": 1},
    ]
    assert data["error"] is None


def test_summary_empty_catalog(client):
    data = client.get("/stats/").json()
    assert data["total_songs"] == 0
    assert data["most_common_genre"] == "-"
    assert data["error"] == "No songs in catalog"


def test_frequency_unique_and_groups(client, scenario_songs):
    load(scenario_songs)

    freq = client.get("/stats/frequency/Genre").json()
    assert freq["counts"] == {"Rock": 2, "Pop": 1}
    assert freq["most_common"] == "Rock"

    assert client.get("/stats/unique/Artist").json()["unique"] == 2

    groups = client.get("/stats/groups", params={"group": "Artist", "member": "Album"}).json()
    assert groups["counts"] == {"Q": 2, "Z": 1}


def test_top_and_shares(client, scenario_songs):
    load(scenario_songs)

    top = client.get("/stats/top/Album", params={"n": 1}).json()
    assert top["entries"] == [{"value": "X", "count": 2}]

    shares = client.get("/stats/shares/Album", params={"n": 1}).json()
    assert shares["total"] == 3
    assert [(e["value"], e["count"]) for e in shares["entries"]] == [("X", 2), ("Other", 1)]


def test_shares_empty_catalog(client):
    assert client.get("/stats/shares/Genre").json()["entries"] == []


def test_bad_field_and_limit(client):
    assert client.get("/stats/frequency/Year").status_code == 400
    assert client.get("/stats/top/Genre", params={"n": -1}).status_code == 400


def test_artist_table(client, scenario_songs):
    load(scenario_songs + [{"Title": "D", "Artist": "Z", "Album": "W", "Genre": "Pop"}])
    rows = client.get("/stats/artists").json()
    assert rows == [
        {"artist": "Q", "songs": 2, "albums": 2, "share_pct": 50.0},
        {"artist": "Z", "songs": 2, "albums": 2, "share_pct": 50.0},
    ]
