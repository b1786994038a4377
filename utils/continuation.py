# utils/continuation.py
"""
Localiza el cursor de paginación de una respuesta, sea página inicial o de
continuación, sin importar qué parser de página lo pida.

El backend fue cambiando de formato y hoy conviven varios, así que se prueban
todos en orden fijo (el orden observado, no un contrato):
  1. `continuations[].nextContinuationData` en el shelf (formato viejo)
  2. el mismo campo un nivel arriba, en el sectionList (transición)
  3. un ítem centinela `continuationItemRenderer` al final de `contents`
  4. `onResponseReceivedActions[].appendContinuationItemsAction` (respuestas
     de continuación que reemplazan el sobre completo)
Para soportar un formato nuevo alcanza con sumar una función a
CONTINUATION_STRATEGIES.
"""
from utils.json_path import (
    CONTINUATION_COMMAND_TOKEN,
    SECTION_LIST_PATHS,
    WATCH_NEXT_QUEUE,
    as_list,
    dict_items,
    first_of_strategies,
    nav,
)

SHELF_KEYS = (
    "musicShelfRenderer",
    "musicPlaylistShelfRenderer",
    "gridRenderer",
    "musicCarouselShelfRenderer",
    "musicImmersiveCarouselShelfRenderer",
)

CONTINUATION_SHELF_KEYS = (
    "musicShelfContinuation",
    "musicPlaylistShelfContinuation",
    "gridContinuation",
    "musicCarouselShelfContinuation",
    "playlistPanelContinuation",
)

CONTINUATION_DATA_KEYS = ("nextContinuationData", "nextRadioContinuationData")

RESPONSE_ACTION_KEYS = ("onResponseReceivedActions", "onResponseReceivedEndpoints")


def _section_lists(response) -> list:
    return [sl for sl in (nav(response, path, dict) for path in SECTION_LIST_PATHS) if sl is not None]


def _shelves(response) -> list:
    """Todos los shelves conocidos de la respuesta, en orden de aparición."""
    shelves = []
    for section_list in _section_lists(response):
        for element in dict_items(section_list.get("contents")):
            for key in SHELF_KEYS:
                shelf = nav(element, (key,), dict)
                if shelf is not None:
                    shelves.append(shelf)
            for inner in dict_items(nav(element, ("itemSectionRenderer", "contents"), list)):
                for key in SHELF_KEYS:
                    shelf = nav(inner, (key,), dict)
                    if shelf is not None:
                        shelves.append(shelf)
    for key in CONTINUATION_SHELF_KEYS:
        shelf = nav(response, ("continuationContents", key), dict)
        if shelf is not None:
            shelves.append(shelf)
    queue = nav(response, WATCH_NEXT_QUEUE, dict)
    if queue is not None:
        shelves.append(queue)
    return shelves


def continuation_data_token(renderer) -> str | None:
    for continuation in dict_items(nav(renderer, ("continuations",), list)):
        for key in CONTINUATION_DATA_KEYS:
            token = nav(continuation, (key, "continuation"), str)
            if token:
                return token
    return None


def sentinel_token(items) -> str | None:
    """Token del `continuationItemRenderer` si es el último ítem de la lista."""
    items = as_list(items)
    if not items:
        return None
    token = nav(items[-1], CONTINUATION_COMMAND_TOKEN, str)
    return token or None


def _first_token(renderers, extract) -> str | None:
    for renderer in renderers:
        token = extract(renderer)
        if token:
            return token
    return None


def legacy_shelf_token(response) -> str | None:
    return _first_token(_shelves(response), continuation_data_token)


def legacy_section_list_token(response) -> str | None:
    return _first_token(_section_lists(response), continuation_data_token)


def sentinel_item_token(response) -> str | None:
    def from_container(renderer):
        return sentinel_token(renderer.get("contents")) or sentinel_token(renderer.get("items"))

    return _first_token(_shelves(response), from_container) or _first_token(
        _section_lists(response), from_container
    )


def _append_actions(response):
    for key in RESPONSE_ACTION_KEYS:
        for action in dict_items(nav(response, (key,), list)):
            append = nav(action, ("appendContinuationItemsAction",), dict)
            if append is not None:
                yield append


def response_action_token(response) -> str | None:
    for append in _append_actions(response):
        token = sentinel_token(append.get("continuationItems"))
        if token:
            return token
    return None


CONTINUATION_STRATEGIES = [
    legacy_shelf_token,
    legacy_section_list_token,
    sentinel_item_token,
    response_action_token,
]


def extract_continuation(response) -> str | None:
    if not isinstance(response, dict):
        return None
    return first_of_strategies(CONTINUATION_STRATEGIES, response)


def continuation_items(response) -> list:
    """
    Ítems nuevos de una página de continuación: vienen en
    `continuationContents.*Continuation` (formato viejo) o en la acción
    `appendContinuationItemsAction` (formato actual).
    """
    for key in (*CONTINUATION_SHELF_KEYS, "sectionListContinuation"):
        shelf = nav(response, ("continuationContents", key), dict)
        if shelf is None:
            continue
        items = shelf.get("contents")
        if not isinstance(items, list):
            items = shelf.get("items")
        if isinstance(items, list):
            return items
    for append in _append_actions(response):
        items = append.get("continuationItems")
        if isinstance(items, list):
            return items
    return []
