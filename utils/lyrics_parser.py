# utils/lyrics_parser.py
"""
Letras en dos pasos: el endpoint `next` trae una pestaña "Lyrics" con un
browseId MPLYt..., y el browse de ese id trae el texto.
"""
import logging

from models.responses import Lyrics
from utils.json_path import LYRICS_SECTIONS, WATCH_NEXT_TABS, dict_items, nav
from utils.navigation import runs_text

logger = logging.getLogger(__name__)

LYRICS_PREFIX = "MPLYt"


def extract_lyrics_browse_id(response: dict) -> str | None:
    for tab in dict_items(nav(response, WATCH_NEXT_TABS, list)):
        browse_id = nav(tab, ("tabRenderer", "endpoint", "browseEndpoint", "browseId"), str)
        if browse_id and browse_id.startswith(LYRICS_PREFIX):
            return browse_id
    return None


def parse_lyrics(response: dict) -> Lyrics:
    for section in dict_items(nav(response, LYRICS_SECTIONS, list)):
        shelf = nav(section, ("musicDescriptionShelfRenderer",), dict)
        if shelf is None:
            continue
        text = runs_text(nav(shelf, ("description",), dict))
        if not text:
            break
        return Lyrics(text=text, source=runs_text(nav(shelf, ("footer",), dict)))

    logger.debug("lyrics: sin texto, keys=%s", sorted(response or {}))
    return Lyrics.unavailable()
