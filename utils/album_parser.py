# utils/album_parser.py
"""
Página de álbum. Comparte la forma del header con las playlists, pero los
artistas salen del strapline (o del subtitle en el header viejo) y el año
del subtitle. Si no hay header se usa el microformat de la página.
"""
import logging

from models.entities import Album
from models.responses import AlbumDetail
from utils.json_path import SINGLE_COLUMN_SECTIONS, TWO_COLUMN_TAB_SECTIONS, dict_items, nav
from utils.navigation import parse_byline_runs, thumbnail_url_from_list
from utils.playlist_parser import DEFAULT_TITLE, parse_playlist_header, parse_playlist_tracks

logger = logging.getLogger(__name__)

DEFAULT_ALBUM_TITLE = "Unknown Album"


def parse_album_info(response: dict) -> dict:
    """Extrae la información general de un álbum desde microformat."""
    micro = nav(response, ("microformat", "microformatDataRenderer"), dict)
    if not micro:
        return {}

    return {
        "title": nav(micro, ("title",), str),
        "description": nav(micro, ("description",), str),
        "thumbnail_url": thumbnail_url_from_list(nav(micro, ("thumbnail", "thumbnails"), list)),
    }


def _header_renderer(response: dict) -> dict | None:
    renderer = nav(response, ("header", "musicDetailHeaderRenderer"), dict)
    if renderer is not None:
        return renderer
    for path in (TWO_COLUMN_TAB_SECTIONS, SINGLE_COLUMN_SECTIONS):
        for section in dict_items(nav(response, path, list)):
            renderer = nav(section, ("musicResponsiveHeaderRenderer",), dict)
            if renderer is not None:
                return renderer
    return None


def parse_album_header_byline(response: dict):
    """(artistas, año) del header: strapline para artistas, subtitle para el año."""
    renderer = _header_renderer(response) or {}
    subtitle = parse_byline_runs(nav(renderer, ("subtitle", "runs"), list))
    strapline = parse_byline_runs(nav(renderer, ("straplineTextOne", "runs"), list))
    return strapline.artists or subtitle.artists, subtitle.year or strapline.year


def parse_album_detail(response: dict, album_id: str) -> AlbumDetail:
    header = parse_playlist_header(response)
    title, info = header.title, {}
    if header.title == DEFAULT_TITLE:
        info = parse_album_info(response)
        title = info.get("title") or DEFAULT_ALBUM_TITLE
        if not info:
            logger.debug("album %s: sin header ni microformat, keys=%s", album_id, sorted(response or {}))

    artists, year = parse_album_header_byline(response)
    thumbnail_url = header.thumbnail_url or info.get("thumbnail_url")
    tracks = parse_playlist_tracks(response, fallback_thumbnail=thumbnail_url)

    album = Album(
        id=album_id,
        title=title,
        artists=artists or None,
        thumbnail_url=thumbnail_url,
        year=year,
        track_count=header.track_count if header.track_count is not None else len(tracks),
    )

    # Las filas del álbum no repiten el álbum: se completa con la referencia
    reference = album.model_copy(update={"track_count": None})
    tracks = [
        track if track.album is not None else track.model_copy(update={"album": reference})
        for track in tracks
    ]
    return AlbumDetail(
        album=album,
        tracks=tracks,
        description=header.description or info.get("description"),
        duration=header.duration,
    )
