import pytest

from models.errors import ParseError
from utils.lyrics_parser import extract_lyrics_browse_id, parse_lyrics
from utils.queue_parser import parse_radio_continuation, parse_radio_queue
from utils.song_parser import parse_song_metadata


def _queue(b, continuations=None):
    return b.watch_next(
        [
            b.panel_video(
                "v1",
                "One",
                byline=[b.browse_run("Band", "UCband"), " • ", b.browse_run("Record", "MPREb_r"), " • ", "2020"],
                length="3:20",
                thumb_url="//img/v1.jpg",
            ),
            b.panel_video("v2"),
            b.panel_video("v3", "Three", wrapped=True),
        ],
        continuations=continuations,
    )


# --- Radio ---

def test_radio_queue(b):
    page = parse_radio_queue(_queue(b, b.next_continuation("radio-2", key="nextRadioContinuationData")))

    assert [s.id for s in page.items] == ["v1", "v2", "v3"]
    first = page.items[0]
    assert first.title == "One"
    assert [a.id for a in first.artists] == ["UCband"]
    assert first.album.id == "MPREb_r"
    assert first.duration == 200
    assert first.thumbnail_url == "https://img/v1.jpg"
    assert page.items[1].title == "Unknown"
    assert page.continuation_token == "radio-2"


def test_radio_continuation(b):
    response = {
        "continuationContents": {
            "playlistPanelContinuation": {
                "contents": [b.panel_video("v4", "Four")],
                "continuations": b.next_continuation("radio-3", key="nextRadioContinuationData"),
            }
        }
    }
    page = parse_radio_continuation(response)
    assert [s.id for s in page.items] == ["v4"]
    assert page.continuation_token == "radio-3"


def test_radio_empty():
    page = parse_radio_queue({})
    assert page.items == []
    assert page.has_more is False


# --- Letras ---

def test_lyrics_browse_id(b):
    response = b.watch_next(
        [b.panel_video("v1", "One")],
        tabs=[
            {"tabRenderer": {"endpoint": {"browseEndpoint": {"browseId": "FEmusic_related"}}}},
            {"tabRenderer": {"endpoint": {"browseEndpoint": {"browseId": "MPLYt_abc"}}}},
        ],
    )
    assert extract_lyrics_browse_id(response) == "MPLYt_abc"


def test_lyrics_browse_id_missing(b):
    assert extract_lyrics_browse_id(b.watch_next([b.panel_video("v1", "One")])) is None


def test_parse_lyrics(b):
    response = {
        "contents": {
            "sectionListRenderer": {
                "contents": [
                    {
                        "musicDescriptionShelfRenderer": {
                            "description": b.text("First line\nSecond line"),
                            "footer": b.text("Source: LyricFind"),
                        }
                    }
                ]
            }
        }
    }
    lyrics = parse_lyrics(response)
    assert lyrics.is_available
    assert lyrics.lines == ["First line", "Second line"]
    assert lyrics.source == "Source: LyricFind"


def test_lyrics_unavailable():
    lyrics = parse_lyrics({"contents": {"sectionListRenderer": {"contents": []}}})
    assert lyrics.is_available is False
    assert lyrics.source is None


# --- Metadata de una canción ---

def test_song_metadata_matches_video_id(b):
    song = parse_song_metadata(_queue(b), "v3")
    assert song.id == "v3"
    assert song.title == "Three"


def test_song_metadata_falls_back_to_first(b):
    assert parse_song_metadata(_queue(b), "other").id == "v1"


def test_song_metadata_error():
    with pytest.raises(ParseError) as excinfo:
        parse_song_metadata({}, "zzz")
    assert excinfo.value.video_id == "zzz"
    assert str(excinfo.value) == "Failed to parse song metadata (videoId=zzz)"
