# utils/section_parser.py
"""
Estrategias para convertir un elemento de `sectionListRenderer.contents` en
una sección. Cada wrapper conocido (carrusel, shelf vertical, card shelf,
carrusel inmersivo, grilla) es una estrategia pura; se prueban en orden y
gana la primera que logra parsear al menos un ítem. Sumar una forma nueva
del backend = agregar una estrategia a la lista.
"""
from models.entities import Album, Artist, Playlist, Song
from models.responses import PodcastSection, Section
from utils.item_parser import dedupe, parse_card_shelf_item, parse_item
from utils.json_path import dict_items, first_of_strategies, nav
from utils.navigation import is_chart_section, runs_text, stable_id

CAROUSEL_TITLE = ("header", "musicCarouselShelfBasicHeaderRenderer", "title")

# (renderer, clave de ítems, ruta del título, título por defecto, ¿chart?)
SHELF_SHAPES = (
    ("musicCarouselShelfRenderer", "contents", CAROUSEL_TITLE, "Unknown Section", None),
    ("musicShelfRenderer", "contents", ("title",), "Unknown Section", None),
    ("musicCardShelfRenderer", "contents", ("header", "musicCardShelfHeaderBasicRenderer", "title"), "Featured", None),
    ("musicImmersiveCarouselShelfRenderer", "contents", CAROUSEL_TITLE, "Featured", None),
    ("gridRenderer", "items", ("header", "gridHeaderRenderer", "title"), "Charts", True),
)


def build_section(title: str, items: list, is_chart=None) -> Section:
    return Section(
        id=stable_id("section", title, items[0].id),
        title=title,
        items=items,
        is_chart=is_chart_section(title) if is_chart is None else is_chart,
    )


def build_podcast_section(title: str, items: list, is_chart=None) -> PodcastSection:
    return PodcastSection(id=stable_id("podcasts", title, items[0].id), title=title, items=items)


def _shelf_strategy(shape, item_parser, factory, card_parser, default_title):
    renderer_key, items_key, title_path, shape_title, chart = shape

    def strategy(element):
        renderer = nav(element, (renderer_key,), dict)
        if renderer is None:
            return None
        items = []
        if card_parser is not None and renderer_key == "musicCardShelfRenderer":
            head = card_parser(renderer)
            if head is not None:
                items.append(head)
        for data in dict_items(renderer.get(items_key)):
            item = item_parser(data)
            if item is not None:
                items.append(item)
        items = dedupe(items)
        if not items:
            return None
        title = runs_text(nav(renderer, title_path, dict)) or default_title or shape_title
        return factory(title, items, chart)

    strategy.__name__ = f"parse_{renderer_key}"
    return strategy


def make_section_strategies(item_parser, factory, card_parser=None, default_title=None):
    strategies = [
        _shelf_strategy(shape, item_parser, factory, card_parser, default_title)
        for shape in SHELF_SHAPES
    ]

    def parse_item_section(element):
        # itemSectionRenderer solo envuelve otros renderers
        for inner in dict_items(nav(element, ("itemSectionRenderer", "contents"), list)):
            section = first_of_strategies(strategies, inner)
            if section:
                return section
        return None

    strategies.append(parse_item_section)
    return tuple(strategies)


def _card_section_item(card):
    item = parse_card_shelf_item(card)
    return item if isinstance(item, (Song, Album, Playlist, Artist)) else None


SECTION_STRATEGIES = make_section_strategies(parse_item, build_section, card_parser=_card_section_item)


def parse_section(element) -> Section | None:
    return first_of_strategies(SECTION_STRATEGIES, element)


def unique_section_ids(sections: list) -> list:
    """
    Dos secciones con mismo título y mismo primer ítem comparten hash; la
    repetida se re-hashea con su posición en la respuesta.
    """
    seen = set()
    unique = []
    for position, section in enumerate(sections):
        if section.id in seen:
            tag = section.id.split("-", 1)[0]
            section = section.model_copy(update={"id": stable_id(tag, section.id, str(position))})
        seen.add(section.id)
        unique.append(section)
    return unique


def parse_sections(elements, strategies=SECTION_STRATEGIES) -> list:
    sections = []
    for element in dict_items(elements):
        section = first_of_strategies(strategies, element)
        if section:
            sections.append(section)
    return unique_section_ids(sections)
