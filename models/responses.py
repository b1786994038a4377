# models/responses.py
"""Resultados tipados que devuelve cada parser de página."""
from typing import Generic, TypeVar

from pydantic import Field

from models.entities import (
    Album,
    Artist,
    MusicModel,
    Playlist,
    PodcastEpisode,
    PodcastItem,
    PodcastShow,
    SectionItem,
    Song,
)

T = TypeVar("T")


class PaginatedResult(MusicModel, Generic[T]):
    """Lista ordenada + cursor opaco para pedir la página siguiente."""

    items: list[T] = Field(default_factory=list)
    continuation_token: str | None = None

    @property
    def has_more(self) -> bool:
        return self.continuation_token is not None


class Section(MusicModel):
    id: str
    title: str
    items: list[SectionItem] = Field(default_factory=list)
    is_chart: bool = False


class PodcastSection(MusicModel):
    id: str
    title: str
    items: list[PodcastItem] = Field(default_factory=list)


class SearchResponse(MusicModel):
    songs: list[Song] = Field(default_factory=list)
    albums: list[Album] = Field(default_factory=list)
    artists: list[Artist] = Field(default_factory=list)
    playlists: list[Playlist] = Field(default_factory=list)
    podcast_shows: list[PodcastShow] = Field(default_factory=list)
    continuation_token: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.songs or self.albums or self.artists or self.playlists or self.podcast_shows)


class SearchSuggestion(MusicModel):
    query: str


class PlaylistDetail(MusicModel):
    playlist: Playlist
    tracks: list[Song] = Field(default_factory=list)
    duration: str | None = None
    continuation_token: str | None = None


class AlbumDetail(MusicModel):
    album: Album
    tracks: list[Song] = Field(default_factory=list)
    description: str | None = None
    duration: str | None = None


class ArtistDetail(MusicModel):
    artist: Artist
    description: str | None = None
    songs: list[Song] = Field(default_factory=list)
    albums: list[Album] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)
    thumbnail_url: str | None = None
    channel_id: str | None = None
    is_subscribed: bool = False
    subscriber_count: str | None = None
    has_more_songs: bool = False
    songs_browse_id: str | None = None
    songs_params: str | None = None
    mix_playlist_id: str | None = None
    mix_video_id: str | None = None


class LibraryContent(MusicModel):
    playlists: list[Playlist] = Field(default_factory=list)
    podcast_shows: list[PodcastShow] = Field(default_factory=list)
    continuation_token: str | None = None


class PodcastShowDetail(MusicModel):
    show: PodcastShow
    episodes: list[PodcastEpisode] = Field(default_factory=list)
    continuation_token: str | None = None
    is_subscribed: bool = False


class Lyrics(MusicModel):
    text: str = ""
    source: str | None = None

    @property
    def is_available(self) -> bool:
        return bool(self.text)

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @classmethod
    def unavailable(cls) -> "Lyrics":
        return cls(text="", source=None)
