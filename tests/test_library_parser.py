from models.entities import PodcastShow
from utils.library_parser import parse_library_content, parse_library_playlists


def _grid(*items):
    return {"gridRenderer": {"items": list(items)}}


def test_library_content_classifies_by_prefix(b):
    response = b.single_column(
        [
            _grid(
                b.two_row_browse("VLPL1", "Road trip", subtitle=["Playlist", " • ", "Me"]),
                b.two_row_browse("MPSPPshow1", "A podcast", subtitle=["Podcast"]),
                b.two_row_browse("MPREb_1", "Saved album"),
                b.two_row_browse("VLLM", "Liked music"),
            )
        ]
    )
    content = parse_library_content(response)
    assert [p.id for p in content.playlists] == ["VLPL1", "VLLM"]
    assert [s.id for s in content.podcast_shows] == ["MPSPPshow1"]


def test_podcast_typed_as_playlist_is_moved_to_shows(b):
    response = b.single_column(
        [_grid(b.two_row_browse("MPSPPshow2", "Mislabeled", page_type="MUSIC_PAGE_TYPE_PLAYLIST"))]
    )
    content = parse_library_content(response)
    assert content.playlists == []
    assert isinstance(content.podcast_shows[0], PodcastShow)
    assert content.podcast_shows[0].title == "Mislabeled"


def test_library_inside_item_section_and_shelf(b):
    response = b.single_column(
        [
            {"itemSectionRenderer": {"contents": [_grid(b.two_row_browse("VLPL2", "Inner"))]}},
            b.shelf("More", [b.responsive_browse("VLPL3", "Row playlist", ["Playlist"])]),
        ]
    )
    assert [p.id for p in parse_library_playlists(response).items] == ["VLPL2", "VLPL3"]


def test_library_continuation(b):
    response = {
        "continuationContents": {
            "gridContinuation": {
                "items": [b.two_row_browse("VLPL9", "Later")],
                "continuations": b.next_continuation("lib-next"),
            }
        }
    }
    result = parse_library_playlists(response)
    assert [p.id for p in result.items] == ["VLPL9"]
    assert result.continuation_token == "lib-next"


def test_library_unrecognized():
    content = parse_library_content({"foo": "bar"})
    assert content.playlists == []
    assert content.podcast_shows == []
