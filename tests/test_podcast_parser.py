import pytest

from models.entities import PodcastEpisode, PodcastShow
from utils.navigation import stable_id
from utils.podcast_parser import (
    DEFAULT_SHOW_TITLE,
    parse_episodes_continuation,
    parse_podcast_continuation,
    parse_podcast_discovery,
    parse_show_detail,
)


def _episodes(b):
    return [
        b.multi_row_episode("e1", "Episode one", show=("The Show", "MPSPPshow"), duration="36 min", progress=50),
        b.multi_row_episode("e2", "Episode two", show=("The Show", "MPSPPshow"), duration="1:11:19",
                            played_text="Played"),
    ]


def test_discovery_sections(b):
    response = b.single_column(
        [
            b.carousel("Popular shows", [b.two_row_browse("MPSPPshow", "The Show", subtitle=["Host"])]),
            b.shelf(None, _episodes(b)),
        ]
    )
    result = parse_podcast_discovery(response)

    assert [s.title for s in result.items] == ["Popular shows", "Podcasts"]
    show = result.items[0].items[0]
    assert isinstance(show, PodcastShow)
    assert show.author == "Host"
    assert result.items[0].id == stable_id("podcasts", "Popular shows", "MPSPPshow")
    assert all(isinstance(e, PodcastEpisode) for e in result.items[1].items)


def test_episode_progress(b):
    result = parse_podcast_discovery(b.single_column([b.shelf("New", _episodes(b))]))
    first, second = result.items[0].items

    assert first.show_browse_id == "MPSPPshow"
    assert first.show_title == "The Show"
    assert first.duration == "36 min"
    assert first.duration_seconds == 36 * 60
    assert first.playback_progress == pytest.approx(0.5)
    assert first.is_played is False
    assert second.duration_seconds == 4279
    assert second.playback_progress == 1.0
    assert second.is_played is True


def test_discovery_continuation(b):
    response = {
        "continuationContents": {
            "sectionListContinuation": {
                "contents": [b.carousel("More shows", [b.two_row_browse("MPSPPb", "B")])],
                "continuations": b.next_continuation("pod-3"),
            }
        }
    }
    result = parse_podcast_continuation(response)
    assert [s.title for s in result.items] == ["More shows"]
    assert result.continuation_token == "pod-3"


def test_carousel_continuation_becomes_more_section(b):
    response = {
        "continuationContents": {
            "musicCarouselShelfContinuation": {"contents": [b.two_row_browse("MPSPPc", "C")]}
        }
    }
    section = parse_podcast_continuation(response).items[0]
    assert section.title == "More"
    assert section.id == stable_id("podcasts", "More", "MPSPPc")


def test_show_detail_legacy_header(b):
    response = b.single_column(
        [b.shelf(None, _episodes(b), continuations=b.next_continuation("ep-next"))],
        header={
            "musicDetailHeaderRenderer": {
                "title": b.text("The Show"),
                "subtitle": b.text("Host"),
                "description": b.text("About the show"),
                "thumbnail": b.thumbnail("https://img/show.jpg"),
                "menu": b.library_menu("LIBRARY_REMOVE", "remove-token"),
            }
        },
    )
    detail = parse_show_detail(response, "MPSPPshow")

    assert detail.show.title == "The Show"
    assert detail.show.author == "Host"
    assert detail.show.description == "About the show"
    assert detail.show.thumbnail_url == "https://img/show.jpg"
    assert detail.is_subscribed is True
    assert [e.id for e in detail.episodes] == ["e1", "e2"]
    assert detail.continuation_token == "ep-next"


def test_show_detail_responsive_header(b):
    header = {
        "musicResponsiveHeaderRenderer": {
            "title": b.text("The Show"),
            "straplineTextOne": b.text("Host"),
            "description": {"musicDescriptionShelfRenderer": {"description": b.text("About")}},
            "buttons": [{"toggleButtonRenderer": {"isToggled": True}}],
        }
    }
    response = b.two_column(tab_sections=[header], secondary_sections=[b.shelf(None, _episodes(b))])
    detail = parse_show_detail(response, "MPSPPshow")

    assert detail.show.author == "Host"
    assert detail.show.description == "About"
    assert detail.is_subscribed is True
    assert [e.id for e in detail.episodes] == ["e1", "e2"]


def test_show_detail_unknown():
    detail = parse_show_detail({}, "MPSPPx")
    assert detail.show.title == DEFAULT_SHOW_TITLE
    assert detail.episodes == []
    assert detail.is_subscribed is False


def test_episodes_continuation(b):
    response = {
        "continuationContents": {
            "musicShelfContinuation": {
                "contents": [b.multi_row_episode("e3", "Episode three")],
                "continuations": b.next_continuation("ep-4"),
            }
        }
    }
    page = parse_episodes_continuation(response)
    assert [e.id for e in page.items] == ["e3"]
    assert page.items[0].playback_progress == 0.0
    assert page.continuation_token == "ep-4"


def test_discovery_two_column_layout(b):
    response = b.two_column(
        tab_sections=[b.carousel("Popular shows", [b.two_row_browse("MPSPPshow", "The Show")])]
    )
    result = parse_podcast_discovery(response)
    assert [s.title for s in result.items] == ["Popular shows"]
