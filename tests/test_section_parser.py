from models.entities import Album, Song
from utils.section_parser import parse_section, parse_sections


def test_carousel_section(b):
    element = b.carousel("New releases", [b.two_row_song("v1", "One"), b.two_row_browse("MPREb_1", "Record")])
    section = parse_section(element)
    assert section.title == "New releases"
    assert [type(i) for i in section.items] == [Song, Album]
    assert section.is_chart is False
    assert section.id.startswith("section-")


def test_section_id_is_stable(b):
    element = b.carousel("Mixed for you", [b.two_row_song("v1", "One")])
    assert parse_section(element).id == parse_section(element).id


def test_shelf_without_title_gets_default(b):
    section = parse_section(b.shelf(None, [b.responsive_song("v1", "One")]))
    assert section.title == "Unknown Section"


def test_empty_or_unknown_elements_are_dropped(b):
    assert parse_section(b.carousel("Empty", [])) is None
    assert parse_section({"musicCarouselShelfRenderer": {"contents": "garbage"}}) is None
    assert parse_section({"brandNewRenderer": {}}) is None


def test_grid_is_chart(b):
    section = parse_section({"gridRenderer": {"items": [b.two_row_browse("VLPL1", "Top 50")]}})
    assert section.title == "Charts"
    assert section.is_chart is True


def test_chart_detected_from_title(b):
    assert parse_section(b.carousel("Top 100 Global", [b.two_row_song("v1", "One")])).is_chart is True


def test_item_section_wrapper(b):
    wrapped = {"itemSectionRenderer": {"contents": [b.carousel("Inside", [b.two_row_song("v1", "One")])]}}
    assert parse_section(wrapped).title == "Inside"


def test_card_shelf_head_item_comes_first(b):
    card = {
        "musicCardShelfRenderer": {
            "title": b.text(b.watch_run("Top hit", "v0")),
            "subtitle": b.text("Song", " • ", b.browse_run("Band", "UCband")),
            "contents": [b.responsive_song("v1", "Other")],
        }
    }
    section = parse_section(card)
    assert section.title == "Featured"
    assert [i.id for i in section.items] == ["v0", "v1"]


def test_duplicate_items_collapse(b):
    section = parse_section(b.carousel("Dupes", [b.two_row_song("v1", "One"), b.two_row_song("v1", "One again")]))
    assert len(section.items) == 1


def test_parse_sections_keeps_order_and_skips_bad(b):
    sections = parse_sections(
        [
            b.carousel("A", [b.two_row_song("a1", "A1")]),
            {"weird": True},
            b.carousel("B", []),
            b.carousel("C", [b.two_row_song("c1", "C1")]),
        ]
    )
    assert [s.title for s in sections] == ["A", "C"]


def test_item_without_id_is_skipped(b):
    nameless = {"musicTwoRowItemRenderer": {"title": b.text("No endpoint")}}
    section = parse_section(b.carousel("Three", [b.two_row_song("v1", "One"), nameless, b.two_row_song("v3", "Three")]))
    assert [i.id for i in section.items] == ["v1", "v3"]


def test_repeated_sections_get_distinct_ids(b):
    elements = [
        b.carousel("Recommended", [b.two_row_song("v1", "One")]),
        b.carousel("Recommended", [b.two_row_song("v1", "One"), b.two_row_song("v2", "Two")]),
    ]
    ids = [s.id for s in parse_sections(elements)]
    assert len(set(ids)) == 2
    assert all(i.startswith("section-") for i in ids)
    # sigue siendo determinístico
    assert ids == [s.id for s in parse_sections(elements)]
