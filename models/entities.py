# models/entities.py
"""
Entidades de dominio inmutables que salen del motor de normalización.

Todas son modelos pydantic congelados: una vez construidas no se editan,
cualquier enriquecimiento posterior (like, biblioteca) devuelve una copia.
Los atributos van en snake_case y se serializan en camelCase como siempre
devolvió la API (videoId, thumbnailUrl, ...).
"""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MusicModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LikeStatus(str, Enum):
    LIKE = "LIKE"
    DISLIKE = "DISLIKE"
    INDIFFERENT = "INDIFFERENT"


class MusicVideoType(str, Enum):
    ATV = "MUSIC_VIDEO_TYPE_ATV"  # pista de audio "canónica"
    OMV = "MUSIC_VIDEO_TYPE_OMV"  # videoclip oficial
    UGC = "MUSIC_VIDEO_TYPE_UGC"  # subido por usuarios
    OFFICIAL_SOURCE_MUSIC = "MUSIC_VIDEO_TYPE_OFFICIAL_SOURCE_MUSIC"
    PODCAST_EPISODE = "MUSIC_VIDEO_TYPE_PODCAST_EPISODE"

    @classmethod
    def from_raw(cls, value):
        try:
            return cls(value)
        except ValueError:
            return None


class Artist(MusicModel):
    kind: Literal["artist"] = "artist"
    id: str = Field(min_length=1)
    name: str
    thumbnail_url: str | None = None

    @property
    def is_navigable(self) -> bool:
        """Solo los channel ids reales (UC...) llevan a una página de artista."""
        return self.id.startswith("UC")


class Album(MusicModel):
    kind: Literal["album"] = "album"
    id: str = Field(min_length=1)
    title: str
    artists: list[Artist] | None = None
    thumbnail_url: str | None = None
    year: str | None = None
    track_count: int | None = None


class Playlist(MusicModel):
    kind: Literal["playlist"] = "playlist"
    id: str = Field(min_length=1)
    title: str
    description: str | None = None
    thumbnail_url: str | None = None
    track_count: int | None = None
    author: str | None = None


class LibraryActionTokens(MusicModel):
    add: str | None = None
    remove: str | None = None


class Song(MusicModel):
    kind: Literal["song"] = "song"
    id: str = Field(min_length=1)
    video_id: str = Field(min_length=1)
    title: str
    artists: list[Artist] = Field(default_factory=list)
    album: Album | None = None
    duration: int | None = None
    thumbnail_url: str | None = None
    music_video_type: MusicVideoType | None = None
    like_status: LikeStatus = LikeStatus.INDIFFERENT
    is_in_library: bool = False
    library_action_tokens: LibraryActionTokens | None = None

    @property
    def artists_display(self) -> str:
        return ", ".join(a.name for a in self.artists)

    @property
    def duration_display(self) -> str:
        if self.duration is None:
            return "--:--"
        return f"{self.duration // 60}:{self.duration % 60:02d}"

    def with_like_status(self, status: LikeStatus) -> "Song":
        return self.model_copy(update={"like_status": status})

    def with_library_status(self, in_library: bool) -> "Song":
        return self.model_copy(update={"is_in_library": in_library})


class PodcastShow(MusicModel):
    kind: Literal["podcast_show"] = "podcast_show"
    id: str = Field(min_length=1)
    title: str
    author: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    episode_count: int | None = None

    @property
    def is_navigable(self) -> bool:
        return self.id.startswith("MPSPP")


class PodcastEpisode(MusicModel):
    kind: Literal["podcast_episode"] = "podcast_episode"
    id: str = Field(min_length=1)
    title: str
    show_title: str | None = None
    show_browse_id: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    published_date: str | None = None  # "3d ago", "Dec 28, 2025"
    duration: str | None = None  # "36 min", "1:11:19"
    duration_seconds: int | None = None
    playback_progress: float = Field(default=0.0, ge=0.0, le=1.0)
    is_played: bool = False


# Uniones etiquetadas por "kind": quien consuma una sección tiene que
# contemplar cada tipo explícitamente.
SectionItem = Annotated[Union[Song, Album, Playlist, Artist], Field(discriminator="kind")]
PodcastItem = Annotated[Union[PodcastShow, PodcastEpisode], Field(discriminator="kind")]
