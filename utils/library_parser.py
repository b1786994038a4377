# utils/library_parser.py
"""
Biblioteca del usuario. En la grilla de la biblioteca las playlists y los
podcasts vienen mezclados, así que se clasifican por prefijo en una sola
pasada.
"""
import logging

from models.entities import Playlist, PodcastShow
from models.responses import LibraryContent, PaginatedResult
from utils.continuation import continuation_items, extract_continuation
from utils.entity_kind import EntityKind, kind_from_prefix
from utils.item_parser import dedupe, parse_responsive_list_item, parse_two_row_item
from utils.json_path import SINGLE_COLUMN_SECTIONS, TWO_COLUMN_TAB_SECTIONS, dict_items, nav

logger = logging.getLogger(__name__)


def _library_renderers(response: dict):
    """Renderers de ítems de la biblioteca, estén en grilla o en shelf."""
    sections = nav(response, SINGLE_COLUMN_SECTIONS, list) or nav(response, TWO_COLUMN_TAB_SECTIONS, list)
    if sections is None:
        items = continuation_items(response)
        if not items:
            logger.debug("library: estructura no reconocida, keys=%s", sorted(response or {}))
        yield from items
        return

    for section in dict_items(sections):
        yield from dict_items(nav(section, ("gridRenderer", "items"), list))
        yield from dict_items(nav(section, ("musicShelfRenderer", "contents"), list))
        for inner in dict_items(nav(section, ("itemSectionRenderer", "contents"), list)):
            yield from dict_items(nav(inner, ("gridRenderer", "items"), list))
            yield from dict_items(nav(inner, ("musicShelfRenderer", "contents"), list))


def _parse_library_item(data: dict):
    renderer = nav(data, ("musicTwoRowItemRenderer",), dict)
    if renderer is not None:
        return parse_two_row_item(renderer)
    renderer = nav(data, ("musicResponsiveListItemRenderer",), dict)
    if renderer is not None:
        return parse_responsive_list_item(renderer)
    return None


def _classify(item):
    """Bucket por prefijo: 'playlist', 'podcast' o None (se ignora)."""
    if item is None:
        return None
    kind = kind_from_prefix(item.id)
    if kind == EntityKind.PODCAST_SHOW:
        return "podcast"
    if kind == EntityKind.PLAYLIST:
        return "playlist"
    return None


def parse_library_content(response: dict) -> LibraryContent:
    playlists, shows = [], []
    for data in _library_renderers(response):
        item = _parse_library_item(data)
        bucket = _classify(item)
        if bucket == "playlist" and isinstance(item, Playlist):
            playlists.append(item)
        elif bucket == "podcast":
            if isinstance(item, PodcastShow):
                shows.append(item)
            elif isinstance(item, Playlist):
                # tarjeta de podcast sin pageType: el prefijo manda
                shows.append(PodcastShow(
                    id=item.id, title=item.title, author=item.author, thumbnail_url=item.thumbnail_url,
                ))

    return LibraryContent(
        playlists=dedupe(playlists),
        podcast_shows=dedupe(shows),
        continuation_token=extract_continuation(response),
    )


def parse_library_playlists(response: dict) -> PaginatedResult[Playlist]:
    content = parse_library_content(response)
    return PaginatedResult[Playlist](items=content.playlists, continuation_token=content.continuation_token)
