# utils/search_parser.py
import logging

from models.entities import Album, Artist, Playlist, PodcastShow, Song
from models.responses import SearchResponse, SearchSuggestion
from utils.continuation import continuation_items, extract_continuation
from utils.item_parser import dedupe, parse_card_shelf_item, parse_responsive_list_item
from utils.json_path import SEARCH_SECTIONS, dict_items, nav
from utils.navigation import runs_text

logger = logging.getLogger(__name__)


def _search_items(response: dict):
    """Ítems crudos de la búsqueda: top result + shelves, o página de continuación."""
    sections = nav(response, SEARCH_SECTIONS, list)
    if sections is None:
        # Continuación de una búsqueda filtrada
        for data in dict_items(continuation_items(response)):
            yield nav(data, ("musicResponsiveListItemRenderer",), dict), parse_responsive_list_item
        return

    for section in dict_items(sections):
        card = nav(section, ("musicCardShelfRenderer",), dict)
        if card is not None:
            yield card, parse_card_shelf_item
            for data in dict_items(card.get("contents")):
                yield nav(data, ("musicResponsiveListItemRenderer",), dict), parse_responsive_list_item
        shelf = nav(section, ("musicShelfRenderer",), dict)
        if shelf is not None:
            for data in dict_items(shelf.get("contents")):
                yield nav(data, ("musicResponsiveListItemRenderer",), dict), parse_responsive_list_item


def parse_search(response: dict) -> SearchResponse:
    buckets = {Song: [], Album: [], Artist: [], Playlist: [], PodcastShow: []}
    found_structure = False

    for renderer, parser in _search_items(response):
        found_structure = True
        if renderer is None:
            continue
        item = parser(renderer)
        bucket = buckets.get(type(item))
        if bucket is not None:
            bucket.append(item)

    if not found_structure:
        logger.debug("search: estructura no reconocida, keys=%s", sorted(response or {}))

    return SearchResponse(
        songs=dedupe(buckets[Song]),
        albums=dedupe(buckets[Album]),
        artists=dedupe(buckets[Artist]),
        playlists=dedupe(buckets[Playlist]),
        podcast_shows=dedupe(buckets[PodcastShow]),
        continuation_token=extract_continuation(response),
    )


SUGGESTION_RENDERERS = ("searchSuggestionRenderer", "historySuggestionRenderer")


def parse_search_suggestions(response: dict) -> list[SearchSuggestion]:
    suggestions = []
    contents = nav(response, ("contents",), list)
    if contents is None:
        logger.debug("suggestions: sin contents, keys=%s", sorted(response or {}))
        return suggestions

    for content in dict_items(contents):
        for item in dict_items(nav(content, ("searchSuggestionsSectionRenderer", "contents"), list)):
            for key in SUGGESTION_RENDERERS:
                query = runs_text(nav(item, (key, "suggestion"), dict))
                if query:
                    suggestions.append(SearchSuggestion(query=query))
                    break
    return suggestions
