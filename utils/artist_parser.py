# utils/artist_parser.py
import logging
from typing import NamedTuple

from models.entities import Album, Artist, Song
from models.responses import ArtistDetail, PaginatedResult
from utils.continuation import extract_continuation
from utils.item_parser import dedupe, parse_track
from utils.json_path import SINGLE_COLUMN_SECTIONS, as_dict, dict_items, first_of, nav
from utils.navigation import extract_thumbnail_url, extract_title, runs_text
from utils.section_parser import parse_section, unique_section_ids

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Unknown Artist"

HEADER_RENDERERS = ("musicImmersiveHeaderRenderer", "musicVisualHeaderRenderer")

_SUBSCRIBED_ICONS = {"SUBSCRIBED", "NOTIFICATION_ON"}
_UNSUBSCRIBED_ICONS = {"SUBSCRIBE", "NOTIFICATION_OFF"}


class ArtistHeader(NamedTuple):
    name: str = DEFAULT_NAME
    description: str | None = None
    thumbnail_url: str | None = None
    channel_id: str | None = None
    is_subscribed: bool = False
    subscriber_count: str | None = None
    mix_playlist_id: str | None = None
    mix_video_id: str | None = None


def _subscription(header: dict, channel_id, is_subscribed):
    """channelId, estado y cantidad de suscriptores desde el botón de suscripción."""
    subscriber_count = None
    button = nav(header, ("subscriptionButton", "subscribeButtonRenderer"), dict)
    if button is not None:
        channel_id = nav(button, ("channelId",), str) or channel_id
        subscribed = nav(button, ("subscribed",), bool)
        if subscribed is not None:
            is_subscribed = subscribed
        subscriber_count = runs_text(nav(button, ("subscriberCountText",), dict)) or runs_text(
            nav(button, ("shortSubscriberCountText",), dict)
        )

    # Algunos headers solo lo informan en el menú
    for item in dict_items(nav(header, ("menu", "menuRenderer", "items"), list)):
        icon = nav(item, ("toggleMenuServiceItemRenderer", "defaultIcon", "iconType"), str)
        if icon in _SUBSCRIBED_ICONS:
            is_subscribed = True
        elif icon in _UNSUBSCRIBED_ICONS:
            is_subscribed = False
    return channel_id, is_subscribed, subscriber_count


def _start_radio(header: dict):
    """(playlistId, videoId) del mix del artista, si lo hay."""
    endpoint = nav(header, ("startRadioButton", "buttonRenderer", "navigationEndpoint"), dict)
    if endpoint is None:
        return None, None
    playlist_endpoint = nav(endpoint, ("watchPlaylistEndpoint",), dict)
    if playlist_endpoint is not None:
        # el backend elige el primer tema
        return nav(playlist_endpoint, ("playlistId",), str), None
    watch = as_dict(endpoint.get("watchEndpoint"))
    return nav(watch, ("playlistId",), str), nav(watch, ("videoId",), str)


def parse_artist_header(response: dict, artist_id: str) -> ArtistHeader:
    default_channel = artist_id if artist_id.startswith("UC") else None
    for key in HEADER_RENDERERS:
        header = nav(response, ("header", key), dict)
        if header is None:
            continue
        name = extract_title(header)
        if not name:
            continue
        channel_id, is_subscribed, subscriber_count = _subscription(header, default_channel, False)
        mix_playlist_id, mix_video_id = _start_radio(header)
        return ArtistHeader(
            name=name,
            description=runs_text(nav(header, ("description",), dict)),
            thumbnail_url=extract_thumbnail_url(header),
            channel_id=channel_id,
            is_subscribed=is_subscribed,
            subscriber_count=subscriber_count,
            mix_playlist_id=mix_playlist_id,
            mix_video_id=mix_video_id,
        )

    logger.debug("artist %s: header no reconocido, keys=%s", artist_id, sorted(response or {}))
    return ArtistHeader(channel_id=default_channel)


def _shelf_songs(shelf: dict) -> list[Song]:
    return [t for t in (parse_track(data) for data in dict_items(shelf.get("contents"))) if t]


def parse_artist_detail(response: dict, artist_id: str) -> ArtistDetail:
    header = parse_artist_header(response, artist_id)
    songs, sections = [], []
    has_more_songs = False
    songs_browse_id = songs_params = None

    for element in dict_items(nav(response, SINGLE_COLUMN_SECTIONS, list)):
        shelf = nav(element, ("musicShelfRenderer",), dict)
        if shelf is not None:
            # "Top songs": lista vertical con botón "ver todo"
            songs.extend(_shelf_songs(shelf))
            browse = nav(shelf, ("bottomEndpoint", "browseEndpoint"), dict)
            if browse is not None and nav(browse, ("browseId",), str):
                has_more_songs = True
                songs_browse_id = browse["browseId"]
                songs_params = nav(browse, ("params",), str)
            elif shelf.get("continuations") is not None:
                has_more_songs = True
            continue

        section = parse_section(element)
        if section:
            sections.append(section)

    albums = [item for section in sections for item in section.items if isinstance(item, Album)]
    artist = Artist(id=artist_id, name=header.name, thumbnail_url=header.thumbnail_url)
    return ArtistDetail(
        artist=artist,
        description=header.description,
        songs=dedupe(songs),
        albums=dedupe(albums),
        sections=unique_section_ids(sections),
        thumbnail_url=header.thumbnail_url,
        channel_id=header.channel_id,
        is_subscribed=header.is_subscribed,
        subscriber_count=header.subscriber_count,
        has_more_songs=has_more_songs,
        songs_browse_id=songs_browse_id,
        songs_params=songs_params,
        mix_playlist_id=header.mix_playlist_id,
        mix_video_id=header.mix_video_id,
    )


def parse_artist_songs(response: dict) -> PaginatedResult[Song]:
    """Lista completa de canciones ("ver todo"): shelf o playlist shelf."""
    songs = []
    for element in dict_items(nav(response, SINGLE_COLUMN_SECTIONS, list)):
        shelf = first_of(element, (("musicShelfRenderer",), ("musicPlaylistShelfRenderer",)), dict)
        if shelf is not None:
            songs.extend(_shelf_songs(shelf))

    if not songs:
        logger.debug("artist songs: sin shelf de canciones, keys=%s", sorted(response or {}))
    return PaginatedResult[Song](items=dedupe(songs), continuation_token=extract_continuation(response))
