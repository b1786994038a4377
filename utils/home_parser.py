# utils/home_parser.py
"""Home y Explore: misma estructura, secciones de carruseles/shelves."""
import logging

from models.responses import PaginatedResult, Section
from utils.continuation import continuation_items, extract_continuation
from utils.json_path import SINGLE_COLUMN_SECTIONS, TWO_COLUMN_TAB_SECTIONS, nav
from utils.section_parser import parse_section, parse_sections

logger = logging.getLogger(__name__)

HOME_LAYOUTS = (SINGLE_COLUMN_SECTIONS, TWO_COLUMN_TAB_SECTIONS)


def parse_home(response: dict) -> PaginatedResult[Section]:
    sections = []
    for layout in HOME_LAYOUTS:
        sections = parse_sections(nav(response, layout, list))
        if sections:
            break
    else:
        logger.debug("home: estructura no reconocida, keys=%s", sorted(response or {}))

    return PaginatedResult[Section](items=sections, continuation_token=extract_continuation(response))


def parse_home_continuation(response: dict) -> PaginatedResult[Section]:
    sections = parse_sections(continuation_items(response))

    # Un musicShelfContinuation suelto es una sola sección vertical
    shelf = nav(response, ("continuationContents", "musicShelfContinuation"), dict)
    if not sections and shelf is not None:
        section = parse_section({"musicShelfRenderer": shelf})
        if section:
            sections = [section]

    return PaginatedResult[Section](items=sections, continuation_token=extract_continuation(response))


# Explore comparte el mismo parser
parse_explore = parse_home
parse_explore_continuation = parse_home_continuation
