# utils/entity_kind.py
"""
Decide qué entidad representa un subárbol a partir del browseId y, si viene,
del pageType explícito. El pageType manda; el prefijo del id es la heurística
de respaldo.
"""
from enum import Enum


class EntityKind(str, Enum):
    SONG = "song"
    ALBUM = "album"
    PLAYLIST = "playlist"
    ARTIST = "artist"
    PODCAST_SHOW = "podcast_show"
    PODCAST_EPISODE = "podcast_episode"


PAGE_TYPE_KINDS = {
    "MUSIC_PAGE_TYPE_ALBUM": EntityKind.ALBUM,
    "MUSIC_PAGE_TYPE_AUDIOBOOK": EntityKind.ALBUM,
    "MUSIC_PAGE_TYPE_PLAYLIST": EntityKind.PLAYLIST,
    "MUSIC_PAGE_TYPE_ARTIST": EntityKind.ARTIST,
    "MUSIC_PAGE_TYPE_USER_CHANNEL": EntityKind.ARTIST,
    "MUSIC_PAGE_TYPE_LIBRARY_ARTIST": EntityKind.ARTIST,
    "MUSIC_PAGE_TYPE_PODCAST_SHOW_DETAIL_PAGE": EntityKind.PODCAST_SHOW,
    "MUSIC_PAGE_TYPE_NON_MUSIC_AUDIO_TRACK_PAGE": EntityKind.PODCAST_EPISODE,
}

# Ordenados del más largo al más corto: RDCLAK antes que RD, MPSPP antes que MPRE
PREFIX_KINDS = (
    ("RDCLAK", EntityKind.PLAYLIST),
    ("MPSPP", EntityKind.PODCAST_SHOW),
    ("MPRE", EntityKind.ALBUM),
    ("OLAK", EntityKind.ALBUM),
    ("VL", EntityKind.PLAYLIST),
    ("PL", EntityKind.PLAYLIST),
    ("RD", EntityKind.PLAYLIST),
    ("UC", EntityKind.ARTIST),
)

PLAYLIST_PREFIXES = ("VL", "PL", "RD")


def kind_from_prefix(browse_id) -> EntityKind | None:
    if not isinstance(browse_id, str):
        return None
    for prefix, kind in PREFIX_KINDS:
        if browse_id.startswith(prefix):
            return kind
    return None


def resolve_kind(browse_id, page_type: str | None = None) -> EntityKind | None:
    if page_type:
        kind = PAGE_TYPE_KINDS.get(page_type)
        if kind is not None:
            return kind
    return kind_from_prefix(browse_id)


def is_navigable(browse_id) -> bool:
    """
    Los ids sintéticos (UUIDs, hashes "artist-...") llevan guión y no abren
    ninguna página, salvo que además tengan un prefijo real conocido.
    """
    if not isinstance(browse_id, str) or not browse_id:
        return False
    if kind_from_prefix(browse_id) is not None:
        return True
    return "-" not in browse_id


def playlist_browse_id(playlist_id: str) -> str:
    """Normaliza el id para pedir la playlist a /browse (PL... -> VLPL...)."""
    if playlist_id.startswith(("VL", "RD", "OLAK", "MPRE", "UC", "MPSPP")):
        return playlist_id
    return f"VL{playlist_id}"
