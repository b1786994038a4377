# utils/playlist_parser.py
"""
Detalle de playlist (y canciones que te gustan). El header y los tracks
cambian de lugar según la revisión del esquema, así que se prueban varias
ubicaciones en orden y, como último recurso, un escaneo acotado de todo el
sobre buscando cualquier `contents` que parsee como tracks.
"""
import logging
from typing import NamedTuple

from models.entities import Playlist, Song
from models.responses import PaginatedResult, PlaylistDetail
from utils.continuation import continuation_items, extract_continuation
from utils.item_parser import dedupe, parse_track, parse_track_count
from utils.json_path import (
    MAX_SCAN_DEPTH,
    SINGLE_COLUMN_SECTIONS,
    TWO_COLUMN_SECONDARY_SECTIONS,
    TWO_COLUMN_TAB_SECTIONS,
    dict_items,
    first_of_strategies,
    nav,
    scan_for,
)
from utils.navigation import extract_thumbnail_url, extract_title, parse_byline_runs, runs_text

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Unknown Playlist"

TRACK_LAYOUTS = (SINGLE_COLUMN_SECTIONS, TWO_COLUMN_SECONDARY_SECTIONS, TWO_COLUMN_TAB_SECTIONS)
TRACK_SHELVES = ("musicShelfRenderer", "musicPlaylistShelfRenderer")


class PlaylistHeader(NamedTuple):
    title: str
    description: str | None = None
    thumbnail_url: str | None = None
    author: str | None = None
    duration: str | None = None
    track_count: int | None = None


def _header_from_renderer(renderer: dict) -> PlaylistHeader | None:
    title = extract_title(renderer)
    if not title:
        return None

    second = nav(renderer, ("secondSubtitle", "runs"), list) or []
    texts = [run.get("text") for run in dict_items(second) if isinstance(run.get("text"), str)]
    # secondSubtitle: ["120 songs", " • ", "6+ hours"]
    track_count = next((c for c in map(parse_track_count, texts) if c is not None), None)
    others = [t for t in texts if t.strip() not in ("", "•") and parse_track_count(t) is None]
    duration = others[-1] if others else None

    byline = parse_byline_runs(nav(renderer, ("subtitle", "runs"), list))
    author = byline.artists[0].name if byline.artists else None
    strapline = runs_text(nav(renderer, ("straplineTextOne",), dict))
    description = runs_text(nav(renderer, ("description",), dict)) or runs_text(
        nav(renderer, ("description", "musicDescriptionShelfRenderer", "description"), dict)
    )
    return PlaylistHeader(
        title=title,
        description=description,
        thumbnail_url=extract_thumbnail_url(renderer),
        author=strapline or author,
        duration=duration,
        track_count=track_count,
    )


def detail_header(response):
    return _header_from_renderer(nav(response, ("header", "musicDetailHeaderRenderer"), dict) or {})


def responsive_header(response):
    for path in (TWO_COLUMN_TAB_SECTIONS, SINGLE_COLUMN_SECTIONS):
        for section in dict_items(nav(response, path, list)):
            renderer = nav(section, ("musicResponsiveHeaderRenderer",), dict)
            if renderer is not None:
                return _header_from_renderer(renderer)
    return None


def immersive_header(response):
    return _header_from_renderer(nav(response, ("header", "musicImmersiveHeaderRenderer"), dict) or {})


def editable_header(response):
    renderer = nav(
        response,
        ("header", "musicEditablePlaylistDetailHeaderRenderer", "header", "musicDetailHeaderRenderer"),
        dict,
    )
    return _header_from_renderer(renderer or {})


HEADER_STRATEGIES = [detail_header, responsive_header, immersive_header, editable_header]


def parse_playlist_header(response: dict) -> PlaylistHeader:
    return first_of_strategies(HEADER_STRATEGIES, response) or PlaylistHeader(title=DEFAULT_TITLE)


def tracks_from_sections(sections, fallback_thumbnail=None) -> list[Song]:
    tracks = []
    for section in dict_items(sections):
        for key in TRACK_SHELVES:
            for data in dict_items(nav(section, (key, "contents"), list)):
                track = parse_track(data, fallback_thumbnail)
                if track is not None:
                    tracks.append(track)
    return tracks


def scan_for_tracks(response, fallback_thumbnail=None, max_depth=MAX_SCAN_DEPTH) -> list[Song]:
    """Rescate: primer `contents` del sobre cuyos elementos parsean como tracks."""

    def visit(node):
        return [
            track
            for track in (parse_track(data, fallback_thumbnail) for data in dict_items(node.get("contents")))
            if track is not None
        ]

    return scan_for(nav(response, ("contents",), dict), visit, max_depth) or []


def parse_playlist_tracks(response: dict, fallback_thumbnail=None) -> list[Song]:
    for layout in TRACK_LAYOUTS:
        tracks = tracks_from_sections(nav(response, layout, list), fallback_thumbnail)
        if tracks:
            return dedupe(tracks)

    tracks = scan_for_tracks(response, fallback_thumbnail)
    if tracks:
        logger.debug("playlist: tracks encontrados solo por escaneo, keys=%s", sorted(response))
    return dedupe(tracks)


def parse_playlist_detail(response: dict, playlist_id: str) -> PlaylistDetail:
    header = parse_playlist_header(response)
    tracks = parse_playlist_tracks(response, fallback_thumbnail=header.thumbnail_url)

    playlist = Playlist(
        id=playlist_id,
        title=header.title,
        description=header.description,
        thumbnail_url=header.thumbnail_url,
        track_count=header.track_count if header.track_count is not None else len(tracks),
        author=header.author,
    )
    return PlaylistDetail(
        playlist=playlist,
        tracks=tracks,
        duration=header.duration,
        continuation_token=extract_continuation(response),
    )


def parse_playlist_continuation(response: dict) -> PaginatedResult[Song]:
    tracks = [t for t in (parse_track(data) for data in dict_items(continuation_items(response))) if t]
    return PaginatedResult[Song](items=dedupe(tracks), continuation_token=extract_continuation(response))


def parse_liked_songs(response: dict) -> PaginatedResult[Song]:
    detail = parse_playlist_detail(response, "LM")
    return PaginatedResult[Song](items=detail.tracks, continuation_token=detail.continuation_token)
