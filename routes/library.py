# routes/library.py
from fastapi import APIRouter, Depends, Query

from models.entities import Playlist, Song
from models.responses import LibraryContent, PaginatedResult
from routes.music import upstream_error
from services.innertube_client import InnerTubeClient, TransportError, get_client
from utils.library_parser import parse_library_content, parse_library_playlists
from utils.playlist_parser import parse_liked_songs, parse_playlist_continuation

router = APIRouter(tags=["library"])

LIKED_SONGS_ID = "FEmusic_liked_videos"
LIBRARY_PLAYLISTS_ID = "FEmusic_liked_playlists"
LIBRARY_LANDING_ID = "FEmusic_library_landing"


@router.get("/liked", response_model=PaginatedResult[Song])
def get_liked_songs(yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_liked_songs(yt.browse(LIKED_SONGS_ID))
    except TransportError as e:
        return upstream_error("liked_songs_error", e)


@router.get("/liked/continuation", response_model=PaginatedResult[Song])
def get_liked_songs_continuation(token: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_playlist_continuation(yt.browse_continuation(token))
    except TransportError as e:
        return upstream_error("liked_songs_error", e)


@router.get("/playlists", response_model=PaginatedResult[Playlist])
def get_library_playlists(yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_library_playlists(yt.browse(LIBRARY_PLAYLISTS_ID))
    except TransportError as e:
        return upstream_error("library_error", e)


@router.get("/", response_model=LibraryContent)
def get_library_content(yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_library_content(yt.browse(LIBRARY_LANDING_ID))
    except TransportError as e:
        return upstream_error("library_error", e)


@router.get("/continuation", response_model=LibraryContent)
def get_library_continuation(token: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_library_content(yt.browse_continuation(token))
    except TransportError as e:
        return upstream_error("library_error", e)
