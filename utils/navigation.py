# utils/navigation.py
"""
Primitivas para sacar título, subtítulo, thumbnail, duración e ids de
cualquier subárbol de InnerTube. Ninguna lanza: si la forma esperada no
está, devuelven None (o lista vacía), que es un resultado normal.
"""
import hashlib
import re
from typing import NamedTuple

from models.entities import Album, Artist, LibraryActionTokens, LikeStatus, MusicVideoType
from utils.entity_kind import EntityKind, resolve_kind
from utils.json_path import (
    BROWSE_ENDPOINT,
    FIXED_COLUMN_TEXT,
    FLEX_COLUMN_TEXT,
    PAGE_TYPE,
    PLAY_BUTTON,
    WATCH_ENDPOINT,
    as_list,
    dict_items,
    first_of,
    nav,
)

CHART_KEYWORDS = (
    "chart",
    "charts",
    "top 100",
    "top 50",
    "trending",
    "daily top",
    "weekly top",
)

SEPARATOR_TOKENS = {"", "•", "&", ",", "·", "and", "y"}

# Etiquetas de tipo que aparecen como primer run del subtítulo ("Song • Artista")
TYPE_LABELS = {
    "Song", "Video", "Album", "Single", "EP", "Playlist", "Artist",
    "Episode", "Podcast", "Profile", "Station", "Audiobook",
}

_COUNT_SUFFIX = re.compile(r"(plays|views|listeners|subscribers|songs|episodes)$", re.IGNORECASE)
_YEAR = re.compile(r"\d{4}")
_LABEL_PARTS = {
    "hours": re.compile(r"(\d+)\s*hours?\b", re.IGNORECASE),
    "minutes": re.compile(r"(\d+)\s*minutes?\b", re.IGNORECASE),
    "seconds": re.compile(r"(\d+)\s*seconds?\b", re.IGNORECASE),
}
_EPISODE_PARTS = {
    "hours": re.compile(r"(\d+)\s*(?:hr|hrs|hour|hours)\b", re.IGNORECASE),
    "minutes": re.compile(r"(\d+)\s*(?:min|mins|minute|minutes)\b", re.IGNORECASE),
    "seconds": re.compile(r"(\d+)\s*(?:sec|secs|second|seconds)\b", re.IGNORECASE),
}
_LEADING_INT = re.compile(r"(\d[\d,.]*)")


# --- Texto ---

def runs_text(node) -> str | None:
    """Concatena todos los `runs[*].text` de un nodo de texto."""
    if not isinstance(node, dict):
        return None
    runs = node.get("runs")
    if isinstance(runs, list):
        texts = [run.get("text") for run in dict_items(runs) if isinstance(run.get("text"), str)]
        return "".join(texts) if texts else None
    simple = node.get("simpleText")
    return simple if isinstance(simple, str) else None


def first_run_text(node) -> str | None:
    return nav(node, ("runs", 0, "text"), str)


def extract_title(data, key: str = "title") -> str | None:
    return runs_text(nav(data, (key,), dict))


def extract_subtitle(data, key: str = "subtitle") -> str | None:
    return runs_text(nav(data, (key,), dict))


def flex_column_runs(data, index: int) -> list:
    return as_list(nav(data, ("flexColumns", index, *FLEX_COLUMN_TEXT, "runs")))


def flex_column_text(data, index: int) -> str | None:
    return runs_text(nav(data, ("flexColumns", index, *FLEX_COLUMN_TEXT), dict))


def extract_title_from_flex_columns(data) -> str | None:
    # Columna 0 = título por convención
    return flex_column_text(data, 0)


def extract_subtitle_from_flex_columns(data) -> str | None:
    return flex_column_text(data, 1)


def parse_count(text) -> int | None:
    """'12 songs' -> 12, '1,234 episodes' -> 1234."""
    if not isinstance(text, str):
        return None
    match = _LEADING_INT.search(text)
    if not match:
        return None
    digits = match.group(1).replace(",", "").replace(".", "")
    return int(digits) if digits.isdigit() else None


# --- Thumbnails ---

THUMBNAIL_PATHS = (
    ("thumbnail", "thumbnails"),
    ("thumbnail", "musicThumbnailRenderer", "thumbnail", "thumbnails"),
    ("thumbnail", "croppedSquareThumbnailRenderer", "thumbnail", "thumbnails"),
    ("thumbnailRenderer", "musicThumbnailRenderer", "thumbnail", "thumbnails"),
    ("thumbnailRenderer", "croppedSquareThumbnailRenderer", "thumbnail", "thumbnails"),
    ("foregroundThumbnail", "musicThumbnailRenderer", "thumbnail", "thumbnails"),
)


def normalize_url(url: str) -> str:
    if url.startswith("//"):
        return "https:" + url
    return url


def thumbnail_url_from_list(thumbnails) -> str | None:
    """La última entrada es la de mayor resolución."""
    urls = [t.get("url") for t in dict_items(thumbnails) if isinstance(t.get("url"), str)]
    return normalize_url(urls[-1]) if urls else None


def extract_thumbnail_url(data) -> str | None:
    for path in THUMBNAIL_PATHS:
        url = thumbnail_url_from_list(nav(data, path, list))
        if url:
            return url
    return None


# --- Duración ---

def parse_duration(text) -> int | None:
    """'3:45' -> 225, '1:23:45' -> 5025. Cualquier otra cosa -> None."""
    if not isinstance(text, str):
        return None
    parts = text.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        return None
    seconds = 0
    for part in parts:
        seconds = seconds * 60 + int(part)
    return seconds


def _sum_parts(text, patterns) -> int | None:
    found = False
    total = 0
    multipliers = {"hours": 3600, "minutes": 60, "seconds": 1}
    for unit, pattern in patterns.items():
        match = pattern.search(text)
        if match:
            found = True
            total += int(match.group(1)) * multipliers[unit]
    return total if found else None


def parse_duration_label(label) -> int | None:
    """Etiqueta de accesibilidad: '..., 4 minutes, 55 seconds' -> 295."""
    if not isinstance(label, str):
        return None
    return _sum_parts(label, _LABEL_PARTS)


def parse_duration_text(text) -> int | None:
    duration = parse_duration(text)
    if duration is not None:
        return duration
    return parse_duration_label(text)


def parse_episode_duration(text) -> int | None:
    """Episodios: '36 min', '1 hr 5 min' o '1:11:19'."""
    duration = parse_duration(text)
    if duration is not None:
        return duration
    if not isinstance(text, str):
        return None
    return _sum_parts(text, _EPISODE_PARTS)


def extract_duration(data) -> int | None:
    # 1) fixedColumns (tracks de playlist/álbum)
    for column in dict_items(nav(data, ("fixedColumns",), list)):
        duration = parse_duration(runs_text(nav(column, FIXED_COLUMN_TEXT, dict)))
        if duration is not None:
            return duration

    # 2) flexColumns desde el final (páginas de artista)
    for column in reversed(as_list(nav(data, ("flexColumns",), list))):
        runs = as_list(nav(column, (*FLEX_COLUMN_TEXT, "runs")))
        for run in reversed(runs):
            duration = parse_duration(nav(run, ("text",), str))
            if duration is not None:
                return duration

    # 3) label de accesibilidad del botón de play
    label = nav(data, (*PLAY_BUTTON, "accessibilityPlayData", "accessibilityData", "label"), str)
    return parse_duration_label(label)


# --- Ids ---

VIDEO_ID_PATHS = (
    ("playlistItemData", "videoId"),
    (*WATCH_ENDPOINT, "videoId"),
    (*PLAY_BUTTON, "playNavigationEndpoint", "watchEndpoint", "videoId"),
)

BROWSE_ENDPOINT_PATHS = (
    BROWSE_ENDPOINT,
    ("title", "runs", 0, *BROWSE_ENDPOINT),
    ("flexColumns", 0, *FLEX_COLUMN_TEXT, "runs", 0, *BROWSE_ENDPOINT),
)

WATCH_ENDPOINT_PATHS = (
    WATCH_ENDPOINT,
    (*PLAY_BUTTON, "playNavigationEndpoint", "watchEndpoint"),
    ("flexColumns", 0, *FLEX_COLUMN_TEXT, "runs", 0, *WATCH_ENDPOINT),
)


def extract_video_id(data) -> str | None:
    for path in VIDEO_ID_PATHS:
        video_id = nav(data, path, str)
        if video_id:
            return video_id
    return None


def extract_browse_endpoint(data) -> dict | None:
    return first_of(data, BROWSE_ENDPOINT_PATHS, dict)


def extract_browse_id(data) -> str | None:
    browse_id = nav(extract_browse_endpoint(data), ("browseId",), str)
    return browse_id or None


def extract_page_type(browse_endpoint) -> str | None:
    return nav(browse_endpoint, PAGE_TYPE, str)


def extract_music_video_type(data) -> MusicVideoType | None:
    endpoint = first_of(data, WATCH_ENDPOINT_PATHS, dict)
    raw = nav(endpoint, ("watchEndpointMusicSupportedConfigs", "watchEndpointMusicConfig", "musicVideoType"), str)
    return MusicVideoType.from_raw(raw) if raw else None


def stable_id(tag: str, *components: str) -> str:
    """
    Id determinístico para entidades sin id real (artistas sin canal).
    Lleva guión, así que nunca se considera navegable.
    """
    digest = hashlib.sha256("\x1f".join((tag, *components)).encode("utf-8")).hexdigest()
    return f"{tag}-{digest[:16]}"


# --- Byline (artistas / álbum / duración / año) ---

class Byline(NamedTuple):
    artists: list
    album: Album | None
    duration: int | None
    year: str | None


def parse_byline_runs(runs) -> Byline:
    artists = []
    album = None
    duration = None
    year = None
    segment = 0
    artist_segment = None
    runs = list(dict_items(runs))

    for i, run in enumerate(runs):
        text = run.get("text")
        if not isinstance(text, str):
            continue
        stripped = text.strip()
        if stripped == "•":
            segment += 1
            continue
        if stripped in SEPARATOR_TOKENS:
            continue
        if i == 0 and stripped in TYPE_LABELS and len(runs) > 1:
            continue

        endpoint = nav(run, BROWSE_ENDPOINT, dict)
        browse_id = nav(endpoint, ("browseId",), str)
        if browse_id:
            kind = resolve_kind(browse_id, extract_page_type(endpoint))
            if kind == EntityKind.ALBUM:
                if album is None:
                    album = Album(id=browse_id, title=stripped)
            elif kind in (EntityKind.ARTIST, None):
                artists.append(Artist(id=browse_id, name=stripped))
                if artist_segment is None:
                    artist_segment = segment
            continue

        if parse_duration(stripped) is not None:
            duration = parse_duration(stripped)
            continue
        if _YEAR.fullmatch(stripped):
            year = stripped
            continue
        if _COUNT_SUFFIX.search(stripped):
            continue

        if artist_segment is None:
            artist_segment = segment
        # Texto plano: solo es artista dentro del primer tramo del byline
        if segment == artist_segment:
            artists.append(Artist(id=stable_id("artist", stripped), name=stripped))

    return Byline(artists, album, duration, year)


def extract_artists(data, key: str = "subtitle") -> list:
    return parse_byline_runs(nav(data, (key, "runs"), list)).artists


# --- Menú (biblioteca / like) ---

class MenuState(NamedTuple):
    tokens: LibraryActionTokens | None
    is_in_library: bool
    like_status: LikeStatus


_ADD_ICONS = {"LIBRARY_ADD", "BOOKMARK_BORDER"}
_REMOVE_ICONS = {"LIBRARY_SAVED", "LIBRARY_REMOVE", "BOOKMARK"}
_LIKE_STATUSES = {"LIKE": LikeStatus.LIKE, "DISLIKE": LikeStatus.DISLIKE}


def _feedback_token(node, key):
    return nav(node, (key, "feedbackEndpoint", "feedbackToken"), str)


def extract_menu_state(renderer) -> MenuState:
    tokens = None
    in_library = False
    like_status = LikeStatus.INDIFFERENT

    menu = nav(renderer, ("menu", "menuRenderer"), dict)
    if menu is None:
        return MenuState(tokens, in_library, like_status)

    for item in dict_items(menu.get("items")):
        service = nav(item, ("menuServiceItemRenderer",), dict)
        icon = nav(service, ("icon", "iconType"), str)
        if icon in _ADD_ICONS:
            token = _feedback_token(service, "serviceEndpoint")
            if token:
                tokens = LibraryActionTokens(add=token)
        elif icon in _REMOVE_ICONS:
            in_library = True
            token = _feedback_token(service, "serviceEndpoint")
            if token:
                tokens = LibraryActionTokens(remove=token)

        toggle = nav(item, ("toggleMenuServiceItemRenderer",), dict)
        icon = nav(toggle, ("defaultIcon", "iconType"), str)
        default_token = _feedback_token(toggle, "defaultServiceEndpoint")
        toggled_token = _feedback_token(toggle, "toggledServiceEndpoint")
        if icon in _ADD_ICONS:
            tokens = LibraryActionTokens(add=default_token, remove=toggled_token)
        elif icon in _REMOVE_ICONS:
            in_library = True
            tokens = LibraryActionTokens(add=toggled_token, remove=default_token)

    for button in dict_items(menu.get("topLevelButtons")):
        status = nav(button, ("likeButtonRenderer", "likeStatus"), str)
        if status:
            like_status = _LIKE_STATUSES.get(status, LikeStatus.INDIFFERENT)

    return MenuState(tokens, in_library, like_status)


def is_chart_section(title) -> bool:
    if not isinstance(title, str):
        return False
    lowered = title.lower()
    return any(keyword in lowered for keyword in CHART_KEYWORDS)
