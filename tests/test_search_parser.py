from utils.search_parser import parse_search, parse_search_suggestions


def _top_result_artist(b):
    return {
        "musicCardShelfRenderer": {
            "title": b.text(b.browse_run("Band", "UCband")),
            "subtitle": b.text("Artist", " • ", "1.2M subscribers"),
            "thumbnail": b.thumbnail("https://img/band.jpg"),
            "contents": [b.responsive_song("s0", "Band hit", artists=[("Band", "UCband")])],
        }
    }


def test_search_buckets_by_kind(b):
    response = b.search_results(
        [
            _top_result_artist(b),
            b.shelf("Songs", [
                b.responsive_song("s1", "One", artists=[("Band", "UCband")], duration="3:01"),
                b.responsive_song("s0", "Band hit again"),
            ]),
            b.shelf("Albums", [b.responsive_browse("MPREb_1", "Record", ["Album", " • ", "Band", " • ", "2020"])]),
            b.shelf("Artists", [b.responsive_browse("UCband", "Band", ["Artist"])]),
            b.shelf("Community playlists", [b.responsive_browse("VLPL1", "Band mix", ["Playlist", " • ", "Someone"])]),
            b.shelf("Podcasts", [b.responsive_browse("MPSPPp1", "Band talk", ["Podcast"])]),
        ]
    )
    result = parse_search(response)

    assert [a.id for a in result.artists] == ["UCband"]
    assert result.artists[0].thumbnail_url == "https://img/band.jpg"
    assert [s.id for s in result.songs] == ["s0", "s1"]
    assert result.songs[1].duration == 181
    assert [a.id for a in result.albums] == ["MPREb_1"]
    assert [p.id for p in result.playlists] == ["VLPL1"]
    assert [p.id for p in result.podcast_shows] == ["MPSPPp1"]
    assert result.is_empty is False


def test_search_continuation_page(b):
    response = b.append_action(
        [b.responsive_song("s5", "Five"), b.responsive_song("s6", "Six"), b.continuation_item("more-results")]
    )
    result = parse_search(response)
    assert [s.id for s in result.songs] == ["s5", "s6"]
    assert result.continuation_token == "more-results"


def test_search_filtered_shelf_token(b):
    response = b.search_results(
        [b.shelf("Songs", [b.responsive_song("s1", "One")], continuations=b.next_continuation("filtered-next"))]
    )
    assert parse_search(response).continuation_token == "filtered-next"


def test_search_unrecognized_is_empty():
    result = parse_search({"contents": {"somethingElse": {}}})
    assert result.is_empty
    assert result.continuation_token is None


def _suggestions(*entries):
    return {"contents": [{"searchSuggestionsSectionRenderer": {"contents": list(entries)}}]}


def test_suggestions(b):
    response = _suggestions(
        {"historySuggestionRenderer": {"suggestion": b.text("old query")}},
        {"searchSuggestionRenderer": {"suggestion": b.text("band ", {"text": "live", "bold": True})}},
        {"musicResponsiveListItemRenderer": {}},
    )
    assert [s.query for s in parse_search_suggestions(response)] == ["old query", "band live"]


def test_suggestions_empty():
    assert parse_search_suggestions({}) == []
