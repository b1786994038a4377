# utils/item_parser.py
"""
Un parser por forma de renderer conocida. Cada uno recibe el subárbol de un
único ítem y devuelve la entidad construida o None si falta lo mínimo
(un id y señal suficiente para saber qué es). Funciones puras.
"""
import logging
import re

from pydantic import ValidationError

from models.entities import (
    Album,
    Artist,
    Playlist,
    PodcastEpisode,
    PodcastShow,
    Song,
)
from utils.entity_kind import EntityKind, resolve_kind
from utils.json_path import WATCH_ENDPOINT, first_of, nav
from utils.navigation import (
    extract_browse_endpoint,
    extract_duration,
    extract_menu_state,
    extract_music_video_type,
    extract_page_type,
    extract_subtitle,
    extract_subtitle_from_flex_columns,
    extract_thumbnail_url,
    extract_title,
    extract_title_from_flex_columns,
    extract_video_id,
    first_run_text,
    flex_column_runs,
    parse_byline_runs,
    parse_duration,
    parse_episode_duration,
    runs_text,
)

logger = logging.getLogger(__name__)

SECTION_ITEM_TYPES = (Song, Album, Playlist, Artist)

_TRACK_COUNT = re.compile(r"([\d][\d,.]*)\s+(?:songs?|tracks?|canciones|episodes?)", re.IGNORECASE)


def parse_track_count(text) -> int | None:
    if not isinstance(text, str):
        return None
    match = _TRACK_COUNT.search(text)
    if not match:
        return None
    digits = re.sub(r"[,.]", "", match.group(1))
    return int(digits) if digits.isdigit() else None


def build_browse_entity(kind, browse_id, title, thumbnail_url=None, subtitle=None, byline=None):
    """Construye Album / Playlist / Artist / PodcastShow según el tipo resuelto."""
    if not browse_id or not title:
        return None
    if kind == EntityKind.ALBUM:
        return Album(
            id=browse_id,
            title=title,
            artists=(byline.artists or None) if byline else None,
            thumbnail_url=thumbnail_url,
            year=byline.year if byline else None,
        )
    if kind == EntityKind.PLAYLIST:
        return Playlist(
            id=browse_id,
            title=title,
            thumbnail_url=thumbnail_url,
            track_count=parse_track_count(subtitle),
            author=subtitle,
        )
    if kind == EntityKind.ARTIST:
        return Artist(id=browse_id, name=title, thumbnail_url=thumbnail_url)
    if kind == EntityKind.PODCAST_SHOW:
        return PodcastShow(id=browse_id, title=title, author=subtitle, thumbnail_url=thumbnail_url)
    return None


def _safe(builder, *args, **kwargs):
    # Un ítem con datos raros se descarta, no tira abajo la sección entera
    try:
        return builder(*args, **kwargs)
    except ValidationError as e:
        logger.debug("Item descartado por datos inválidos: %s", e.errors()[:1])
        return None


# --- musicTwoRowItemRenderer (tarjetas de carrusel) ---

def _parse_two_row_item(renderer: dict):
    title = extract_title(renderer)
    if not title:
        return None
    thumbnail_url = extract_thumbnail_url(renderer)
    subtitle_runs = nav(renderer, ("subtitle", "runs"), list)

    video_id = first_of(
        renderer,
        ((*WATCH_ENDPOINT, "videoId"), ("title", "runs", 0, *WATCH_ENDPOINT, "videoId")),
        str,
    )
    if video_id:
        byline = parse_byline_runs(subtitle_runs)
        return Song(
            id=video_id,
            video_id=video_id,
            title=title,
            artists=byline.artists,
            album=byline.album,
            duration=byline.duration,
            thumbnail_url=thumbnail_url,
            music_video_type=extract_music_video_type(renderer),
        )

    endpoint = extract_browse_endpoint(renderer)
    browse_id = nav(endpoint, ("browseId",), str)
    kind = resolve_kind(browse_id, extract_page_type(endpoint))
    return build_browse_entity(
        kind,
        browse_id,
        title,
        thumbnail_url,
        subtitle=extract_subtitle(renderer),
        byline=parse_byline_runs(subtitle_runs),
    )


def parse_two_row_item(renderer: dict):
    return _safe(_parse_two_row_item, renderer)


# --- musicResponsiveListItemRenderer (filas de listas) ---

def _song_from_responsive(renderer: dict, video_id: str, fallback_thumbnail=None) -> Song:
    byline = parse_byline_runs(flex_column_runs(renderer, 1))
    # En playlists el álbum va en su propia columna
    album = byline.album or parse_byline_runs(flex_column_runs(renderer, 2)).album
    duration = extract_duration(renderer)
    if duration is None:
        duration = byline.duration
    menu = extract_menu_state(renderer)

    return Song(
        id=video_id,
        video_id=video_id,
        title=extract_title_from_flex_columns(renderer) or "Unknown",
        artists=byline.artists,
        album=album,
        duration=duration,
        thumbnail_url=extract_thumbnail_url(renderer) or fallback_thumbnail,
        music_video_type=extract_music_video_type(renderer),
        like_status=menu.like_status,
        is_in_library=menu.is_in_library,
        library_action_tokens=menu.tokens,
    )


def _browse_from_responsive(renderer: dict):
    endpoint = extract_browse_endpoint(renderer)
    browse_id = nav(endpoint, ("browseId",), str)
    kind = resolve_kind(browse_id, extract_page_type(endpoint))
    if kind is None:
        return None
    return build_browse_entity(
        kind,
        browse_id,
        extract_title_from_flex_columns(renderer),
        extract_thumbnail_url(renderer),
        subtitle=extract_subtitle_from_flex_columns(renderer),
        byline=parse_byline_runs(flex_column_runs(renderer, 1)),
    )


def _parse_responsive_list_item(renderer: dict):
    video_id = extract_video_id(renderer)
    if video_id:
        return _song_from_responsive(renderer, video_id)
    # Sin videoId reproducible: quizás es un álbum/playlist/artista
    return _browse_from_responsive(renderer)


def parse_responsive_list_item(renderer: dict):
    return _safe(_parse_responsive_list_item, renderer)


# --- musicCardShelfRenderer ("Top result" de búsqueda, tarjetas destacadas) ---

def _parse_card_shelf_item(card: dict):
    title = extract_title(card)
    if not title:
        return None
    thumbnail_url = extract_thumbnail_url(card)
    subtitle_runs = nav(card, ("subtitle", "runs"), list)
    byline = parse_byline_runs(subtitle_runs)

    video_id = first_of(
        card,
        (("title", "runs", 0, *WATCH_ENDPOINT, "videoId"), (*WATCH_ENDPOINT, "videoId")),
        str,
    )
    if video_id:
        return Song(
            id=video_id,
            video_id=video_id,
            title=title,
            artists=byline.artists,
            album=byline.album,
            duration=byline.duration,
            thumbnail_url=thumbnail_url,
            music_video_type=extract_music_video_type(card),
        )

    endpoint = extract_browse_endpoint(card)
    browse_id = nav(endpoint, ("browseId",), str)
    kind = resolve_kind(browse_id, extract_page_type(endpoint))
    return build_browse_entity(
        kind, browse_id, title, thumbnail_url, subtitle=extract_subtitle(card), byline=byline
    )


def parse_card_shelf_item(card: dict):
    return _safe(_parse_card_shelf_item, card)


# --- playlistPanelVideoRenderer (cola de reproducción / radio) ---

def unwrap_panel_video(item: dict) -> dict | None:
    return first_of(
        item,
        (
            ("playlistPanelVideoRenderer",),
            ("playlistPanelVideoWrapperRenderer", "primaryRenderer", "playlistPanelVideoRenderer"),
        ),
        dict,
    )


def _parse_panel_video(item: dict):
    renderer = unwrap_panel_video(item)
    if renderer is None:
        return None
    video_id = nav(renderer, ("videoId",), str)
    if not video_id:
        return None

    byline = parse_byline_runs(nav(renderer, ("longBylineText", "runs"), list))
    menu = extract_menu_state(renderer)
    return Song(
        id=video_id,
        video_id=video_id,
        title=runs_text(nav(renderer, ("title",), dict)) or "Unknown",
        artists=byline.artists,
        album=byline.album,
        duration=parse_duration(first_run_text(nav(renderer, ("lengthText",), dict))),
        thumbnail_url=extract_thumbnail_url(renderer),
        music_video_type=extract_music_video_type(renderer),
        like_status=menu.like_status,
        is_in_library=menu.is_in_library,
        library_action_tokens=menu.tokens,
    )


def parse_panel_video(item: dict):
    return _safe(_parse_panel_video, item)


# --- musicMultiRowListItemRenderer (episodios con progreso) ---

def _playback_state(renderer: dict):
    progress = 0.0
    played = False
    percentage = first_of(
        renderer,
        (
            ("playbackProgress", "musicPlaybackProgressRenderer", "playbackProgressPercentage"),
            ("playbackProgress", "playbackProgressPercentage"),
        ),
        (int, float),
    )
    if percentage is not None:
        progress = min(max(float(percentage) / 100.0, 0.0), 1.0)
        played = percentage >= 95

    played_text = first_run_text(nav(renderer, ("playedText",), dict)) or first_run_text(
        nav(renderer, ("playbackProgress", "musicPlaybackProgressRenderer", "playedText"), dict)
    )
    if played_text and played_text.strip().lower() == "played":
        progress, played = 1.0, True
    return progress, played


def _show_browse_id(renderer: dict) -> str | None:
    for run in nav(renderer, ("subtitle", "runs"), list) or []:
        browse_id = nav(run, ("navigationEndpoint", "browseEndpoint", "browseId"), str)
        if browse_id and browse_id.startswith("MPSPP"):
            return browse_id
    return None


def _parse_multi_row_item(renderer: dict):
    video_id = first_of(
        renderer,
        (("onTap", "watchEndpoint", "videoId"), (*WATCH_ENDPOINT, "videoId")),
        str,
    )
    if not video_id:
        return None

    duration = first_run_text(nav(renderer, ("durationText",), dict))
    progress, played = _playback_state(renderer)
    return PodcastEpisode(
        id=video_id,
        title=first_run_text(nav(renderer, ("title",), dict)) or "Unknown Episode",
        show_title=first_run_text(nav(renderer, ("subtitle",), dict)),
        show_browse_id=_show_browse_id(renderer),
        description=runs_text(nav(renderer, ("description",), dict)),
        thumbnail_url=extract_thumbnail_url(renderer),
        published_date=first_run_text(nav(renderer, ("publishedTimeText",), dict)),
        duration=duration,
        duration_seconds=parse_episode_duration(duration),
        playback_progress=progress,
        is_played=played,
    )


def parse_multi_row_item(renderer: dict):
    return _safe(_parse_multi_row_item, renderer)


# --- Despachadores ---

def parse_item(data: dict):
    """Ítem de sección (Song / Album / Playlist / Artist) o None."""
    renderer = nav(data, ("musicTwoRowItemRenderer",), dict)
    if renderer is not None:
        item = parse_two_row_item(renderer)
    else:
        renderer = nav(data, ("musicResponsiveListItemRenderer",), dict)
        item = parse_responsive_list_item(renderer) if renderer is not None else None
    return item if isinstance(item, SECTION_ITEM_TYPES) else None


def parse_track(data: dict, fallback_thumbnail=None) -> Song | None:
    """Fila de playlist/álbum: tiene que ser una canción reproducible."""
    renderer = nav(data, ("musicResponsiveListItemRenderer",), dict)
    if renderer is None:
        return None
    video_id = extract_video_id(renderer)
    if not video_id:
        return None
    return _safe(_song_from_responsive, renderer, video_id, fallback_thumbnail)


def _podcast_from_two_row(renderer: dict):
    title = extract_title(renderer)
    if not title:
        return None
    thumbnail_url = extract_thumbnail_url(renderer)

    endpoint = extract_browse_endpoint(renderer)
    browse_id = nav(endpoint, ("browseId",), str)
    if resolve_kind(browse_id, extract_page_type(endpoint)) == EntityKind.PODCAST_SHOW:
        return PodcastShow(
            id=browse_id,
            title=title,
            author=extract_subtitle(renderer),
            thumbnail_url=thumbnail_url,
        )

    video_id = nav(renderer, (*WATCH_ENDPOINT, "videoId"), str)
    if video_id:
        return PodcastEpisode(
            id=video_id,
            title=title,
            show_title=extract_subtitle(renderer),
            thumbnail_url=thumbnail_url,
        )
    return None


def _podcast_from_responsive(renderer: dict):
    video_id = extract_video_id(renderer)
    if video_id:
        return PodcastEpisode(
            id=video_id,
            title=extract_title_from_flex_columns(renderer) or "Unknown Episode",
            show_title=extract_subtitle_from_flex_columns(renderer),
            thumbnail_url=extract_thumbnail_url(renderer),
        )
    item = _browse_from_responsive(renderer)
    return item if isinstance(item, PodcastShow) else None


def parse_podcast_item(data: dict):
    """Show o episodio de podcast, según el renderer."""
    renderer = nav(data, ("musicTwoRowItemRenderer",), dict)
    if renderer is not None:
        return _safe(_podcast_from_two_row, renderer)
    renderer = nav(data, ("musicMultiRowListItemRenderer",), dict)
    if renderer is not None:
        return parse_multi_row_item(renderer)
    renderer = nav(data, ("musicResponsiveListItemRenderer",), dict)
    if renderer is not None:
        return _safe(_podcast_from_responsive, renderer)
    return None


def dedupe(items: list) -> list:
    """Quita repetidos por (tipo, id) conservando la primera aparición."""
    seen = set()
    unique = []
    for item in items:
        key = (item.kind, item.id)
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique
