# utils/song_parser.py
"""
Metadatos de una sola canción (like, biblioteca, artistas) a partir del
primer ítem de la cola del endpoint `next`. A diferencia del resto de los
parsers, este no degrada: si no encuentra la canción es un error.
"""
import logging

from models.entities import Song
from models.errors import ParseError
from utils.item_parser import parse_panel_video, unwrap_panel_video
from utils.json_path import WATCH_NEXT_QUEUE, dict_items, nav

logger = logging.getLogger(__name__)


def extract_panel_item(response: dict, video_id: str) -> dict:
    """El ítem de la cola que corresponde a `video_id` (o el primero)."""
    contents = nav(response, (*WATCH_NEXT_QUEUE, "contents"), list)
    items = [item for item in dict_items(contents) if unwrap_panel_video(item) is not None]
    if not items:
        raise ParseError("Failed to parse song metadata", video_id)

    for item in items:
        if nav(unwrap_panel_video(item), ("videoId",), str) == video_id:
            return item
    logger.debug("song %s: no está en la cola, se usa el primer ítem", video_id)
    return items[0]


def parse_song_metadata(response: dict, video_id: str) -> Song:
    song = parse_panel_video(extract_panel_item(response, video_id))
    if song is None:
        raise ParseError("Failed to parse song metadata", video_id)
    return song
