# utils/json_path.py
"""
Mini combinadores para navegar el JSON de InnerTube.

En vez de encadenar `.get("x", {}).get("y", {})` en cada parser, las rutas
fijas se declaran como tuplas de claves (str = clave de dict, int = índice de
lista) y `nav` devuelve el valor o None ante cualquier clave faltante, tipo
equivocado o índice fuera de rango. Nunca lanza.
"""
from collections.abc import Callable, Iterable, Sequence

# Límite duro del escaneo recursivo de rescate (ver scan_for)
MAX_SCAN_DEPTH = 10

_MISSING = object()


def nav(tree, path: Sequence, expected: type | tuple | None = None):
    node = tree
    for key in path:
        if isinstance(key, str):
            if not isinstance(node, dict):
                return None
            node = node.get(key, _MISSING)
            if node is _MISSING:
                return None
        elif isinstance(key, int):
            if not isinstance(node, list):
                return None
            try:
                node = node[key]
            except IndexError:
                return None
        else:
            return None
    if node is None:
        return None
    if expected is not None and not isinstance(node, expected):
        return None
    return node


def first_of(tree, paths: Iterable[Sequence], expected: type | tuple | None = None):
    for path in paths:
        value = nav(tree, path, expected)
        if value is not None:
            return value
    return None


def as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def as_list(value) -> list:
    return value if isinstance(value, list) else []


def dict_items(value):
    """Solo los elementos dict de una lista (el resto se ignora)."""
    for item in as_list(value):
        if isinstance(item, dict):
            yield item


def first_of_strategies(strategies: Iterable[Callable], tree):
    """Evalúa estrategias en orden; gana la primera que devuelve algo no vacío."""
    for strategy in strategies:
        result = strategy(tree)
        if result:
            return result
    return None


def scan_for(tree, visit: Callable, max_depth: int = MAX_SCAN_DEPTH):
    """
    Recorrido en profundidad con pila explícita (sin recursión) y tope de
    profundidad. `visit(node)` se llama en cada dict; el primer resultado
    no vacío corta el recorrido. El orden de visita respeta el orden de
    claves y de listas del JSON.
    """
    if not isinstance(tree, (dict, list)):
        return None
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        if depth >= max_depth:
            continue
        if isinstance(node, dict):
            found = visit(node)
            if found:
                return found
            children, child_depth = list(node.values()), depth + 1
        else:
            # las listas no cuentan como nivel propio
            children, child_depth = node, depth
        for child in reversed(children):
            if isinstance(child, (dict, list)):
                stack.append((child, child_depth))
    return None


# --- Rutas fijas por endpoint ---

TAB_SECTION_LIST = ("tabRenderer", "content", "sectionListRenderer")

SINGLE_COLUMN_SECTION_LIST = (
    "contents", "singleColumnBrowseResultsRenderer", "tabs", 0, *TAB_SECTION_LIST,
)
TWO_COLUMN_SECONDARY_SECTION_LIST = (
    "contents", "twoColumnBrowseResultsRenderer", "secondaryContents", "sectionListRenderer",
)
TWO_COLUMN_TAB_SECTION_LIST = (
    "contents", "twoColumnBrowseResultsRenderer", "tabs", 0, *TAB_SECTION_LIST,
)
SEARCH_SECTION_LIST = (
    "contents", "tabbedSearchResultsRenderer", "tabs", 0, *TAB_SECTION_LIST,
)
PLAIN_SECTION_LIST = ("contents", "sectionListRenderer")
SECTION_LIST_CONTINUATION = ("continuationContents", "sectionListContinuation")

SINGLE_COLUMN_SECTIONS = (*SINGLE_COLUMN_SECTION_LIST, "contents")
TWO_COLUMN_SECONDARY_SECTIONS = (*TWO_COLUMN_SECONDARY_SECTION_LIST, "contents")
TWO_COLUMN_TAB_SECTIONS = (*TWO_COLUMN_TAB_SECTION_LIST, "contents")
SEARCH_SECTIONS = (*SEARCH_SECTION_LIST, "contents")
LYRICS_SECTIONS = (*PLAIN_SECTION_LIST, "contents")

# Todas las ubicaciones conocidas de un sectionListRenderer, en orden
SECTION_LIST_PATHS = (
    SINGLE_COLUMN_SECTION_LIST,
    TWO_COLUMN_SECONDARY_SECTION_LIST,
    TWO_COLUMN_TAB_SECTION_LIST,
    SEARCH_SECTION_LIST,
    PLAIN_SECTION_LIST,
    SECTION_LIST_CONTINUATION,
)

WATCH_NEXT_TABS = (
    "contents", "singleColumnMusicWatchNextResultsRenderer", "tabbedRenderer",
    "watchNextTabbedResultsRenderer", "tabs",
)
WATCH_NEXT_QUEUE = (
    *WATCH_NEXT_TABS, 0, "tabRenderer", "content", "musicQueueRenderer", "content",
    "playlistPanelRenderer",
)

BROWSE_ENDPOINT = ("navigationEndpoint", "browseEndpoint")
WATCH_ENDPOINT = ("navigationEndpoint", "watchEndpoint")
PAGE_TYPE = (
    "browseEndpointContextSupportedConfigs", "browseEndpointContextMusicConfig", "pageType",
)
PLAY_BUTTON = (
    "overlay", "musicItemThumbnailOverlayRenderer", "content", "musicPlayButtonRenderer",
)
FLEX_COLUMN_TEXT = ("musicResponsiveListItemFlexColumnRenderer", "text")
FIXED_COLUMN_TEXT = ("musicResponsiveListItemFixedColumnRenderer", "text")
CONTINUATION_COMMAND_TOKEN = (
    "continuationItemRenderer", "continuationEndpoint", "continuationCommand", "token",
)
