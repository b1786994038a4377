# utils/queue_parser.py
"""Cola de radio/mix del endpoint `next`, página inicial y continuaciones."""
import logging

from models.entities import Song
from models.responses import PaginatedResult
from utils.continuation import continuation_items, extract_continuation
from utils.item_parser import dedupe, parse_panel_video
from utils.json_path import WATCH_NEXT_QUEUE, dict_items, nav

logger = logging.getLogger(__name__)


def queue_contents(response: dict) -> list:
    contents = nav(response, (*WATCH_NEXT_QUEUE, "contents"), list)
    if contents is None:
        contents = continuation_items(response)
    return contents


def parse_radio_queue(response: dict) -> PaginatedResult[Song]:
    contents = queue_contents(response)
    if not contents:
        logger.debug("radio: cola vacía o no reconocida, keys=%s", sorted(response or {}))

    songs = [song for song in (parse_panel_video(item) for item in dict_items(contents)) if song]
    return PaginatedResult[Song](items=dedupe(songs), continuation_token=extract_continuation(response))


# Misma forma para la primera página y las siguientes
parse_radio_continuation = parse_radio_queue
