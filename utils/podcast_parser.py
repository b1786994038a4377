# utils/podcast_parser.py
"""
Podcasts: descubrimiento (secciones de shows y episodios) y detalle de un
show con su lista de episodios paginada.
"""
import logging

from models.entities import PodcastEpisode, PodcastShow
from models.responses import PaginatedResult, PodcastSection, PodcastShowDetail
from utils.continuation import continuation_items, extract_continuation
from utils.item_parser import dedupe, parse_podcast_item
from utils.json_path import (
    SINGLE_COLUMN_SECTIONS,
    TWO_COLUMN_SECONDARY_SECTIONS,
    TWO_COLUMN_TAB_SECTIONS,
    dict_items,
    nav,
)
from utils.navigation import extract_menu_state, extract_thumbnail_url, extract_title, runs_text, stable_id
from utils.section_parser import build_podcast_section, make_section_strategies, parse_sections

logger = logging.getLogger(__name__)

DEFAULT_SHOW_TITLE = "Unknown Show"

PODCAST_SECTION_STRATEGIES = make_section_strategies(
    parse_podcast_item, build_podcast_section, default_title="Podcasts"
)

DISCOVERY_LAYOUTS = (SINGLE_COLUMN_SECTIONS, TWO_COLUMN_TAB_SECTIONS)
EPISODE_LAYOUTS = (TWO_COLUMN_SECONDARY_SECTIONS, SINGLE_COLUMN_SECTIONS)
EPISODE_SHELVES = ("musicShelfRenderer", "musicPlaylistShelfRenderer")


def parse_podcast_discovery(response: dict) -> PaginatedResult[PodcastSection]:
    sections = []
    for layout in DISCOVERY_LAYOUTS:
        sections = parse_sections(nav(response, layout, list), PODCAST_SECTION_STRATEGIES)
        if sections:
            break
    else:
        logger.debug("podcasts: estructura no reconocida, keys=%s", sorted(response or {}))
    return PaginatedResult[PodcastSection](items=sections, continuation_token=extract_continuation(response))


def parse_podcast_continuation(response: dict) -> PaginatedResult[PodcastSection]:
    sections = parse_sections(
        nav(response, ("continuationContents", "sectionListContinuation", "contents"), list)
        or continuation_items(response),
        PODCAST_SECTION_STRATEGIES,
    )

    # Continuación de un carrusel suelto: los ítems van a una sección "More"
    carousel = nav(response, ("continuationContents", "musicCarouselShelfContinuation"), dict)
    if not sections and carousel is not None:
        items = dedupe([i for i in (parse_podcast_item(d) for d in dict_items(carousel.get("contents"))) if i])
        if items:
            sections = [PodcastSection(id=stable_id("podcasts", "More", items[0].id), title="More", items=items)]

    return PaginatedResult[PodcastSection](items=sections, continuation_token=extract_continuation(response))


# --- Detalle del show ---

def _responsive_header(response: dict) -> dict | None:
    for path in (TWO_COLUMN_TAB_SECTIONS, SINGLE_COLUMN_SECTIONS):
        for section in dict_items(nav(response, path, list)):
            renderer = nav(section, ("musicResponsiveHeaderRenderer",), dict)
            if renderer is not None:
                return renderer
    return None


def _is_toggled(renderer: dict) -> bool:
    for button in dict_items(nav(renderer, ("buttons",), list)):
        if nav(button, ("toggleButtonRenderer", "isToggled"), bool):
            return True
    return False


def parse_show_header(response: dict, show_id: str):
    """(PodcastShow, suscripto) desde el header que venga."""
    legacy = nav(response, ("header", "musicDetailHeaderRenderer"), dict)
    if legacy is not None and extract_title(legacy):
        show = PodcastShow(
            id=show_id,
            title=extract_title(legacy),
            author=runs_text(nav(legacy, ("subtitle",), dict)) or None,
            description=runs_text(nav(legacy, ("description",), dict)),
            thumbnail_url=extract_thumbnail_url(legacy),
        )
        return show, extract_menu_state(legacy).is_in_library

    responsive = _responsive_header(response)
    if responsive is not None and extract_title(responsive):
        description = runs_text(
            nav(responsive, ("description", "musicDescriptionShelfRenderer", "description"), dict)
        ) or runs_text(nav(responsive, ("description",), dict))
        show = PodcastShow(
            id=show_id,
            title=extract_title(responsive),
            author=runs_text(nav(responsive, ("straplineTextOne",), dict)),
            description=description,
            thumbnail_url=extract_thumbnail_url(responsive),
        )
        return show, _is_toggled(responsive) or extract_menu_state(responsive).is_in_library

    logger.debug("show %s: header no reconocido, keys=%s", show_id, sorted(response or {}))
    return PodcastShow(id=show_id, title=DEFAULT_SHOW_TITLE), False


def _episodes(items) -> list[PodcastEpisode]:
    return [e for e in (parse_podcast_item(data) for data in dict_items(items)) if isinstance(e, PodcastEpisode)]


def parse_show_episodes(response: dict) -> list[PodcastEpisode]:
    for layout in EPISODE_LAYOUTS:
        episodes = []
        for section in dict_items(nav(response, layout, list)):
            for key in EPISODE_SHELVES:
                episodes.extend(_episodes(nav(section, (key, "contents"), list)))
        if episodes:
            return dedupe(episodes)
    return []


def parse_show_detail(response: dict, show_id: str) -> PodcastShowDetail:
    show, is_subscribed = parse_show_header(response, show_id)
    episodes = parse_show_episodes(response)
    return PodcastShowDetail(
        show=show,
        episodes=episodes,
        continuation_token=extract_continuation(response),
        is_subscribed=is_subscribed,
    )


def parse_episodes_continuation(response: dict) -> PaginatedResult[PodcastEpisode]:
    return PaginatedResult[PodcastEpisode](
        items=dedupe(_episodes(continuation_items(response))),
        continuation_token=extract_continuation(response),
    )
