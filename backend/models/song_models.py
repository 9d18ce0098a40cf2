from pydantic import BaseModel, ConfigDict, Field

SONG_FIELDS = ("Title", "Artist", "Album", "Genre")


class SongIn(BaseModel):
    Title: str
    Artist: str
    Album: str
    Genre: str


class Song(SongIn):
    """
    A stored song. The identifier is assigned by the store on creation
    and is serialised as `_id`, document-store style.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")


class SongValidation(BaseModel):
    valid: bool
    errors: dict[str, str] = {}
