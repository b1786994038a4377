# routes/music.py
import logging

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse

from models.entities import Song
from models.errors import ParseError
from models.responses import (
    AlbumDetail,
    ArtistDetail,
    Lyrics,
    PaginatedResult,
    PlaylistDetail,
    SearchResponse,
    SearchSuggestion,
    Section,
)
from services.innertube_client import InnerTubeClient, TransportError, get_client
from utils.album_parser import parse_album_detail
from utils.artist_parser import parse_artist_detail, parse_artist_songs
from utils.entity_kind import playlist_browse_id
from utils.home_parser import parse_explore, parse_home, parse_home_continuation
from utils.lyrics_parser import extract_lyrics_browse_id, parse_lyrics
from utils.playlist_parser import parse_playlist_continuation, parse_playlist_detail
from utils.queue_parser import parse_radio_continuation, parse_radio_queue
from utils.search_parser import parse_search, parse_search_suggestions
from utils.song_parser import parse_song_metadata

router = APIRouter(tags=["music"])
logger = logging.getLogger("uvicorn.error")

HOME_ID = "FEmusic_home"
EXPLORE_ID = "FEmusic_explore"


def upstream_error(error: str, exc: Exception, id: str | None = None) -> JSONResponse:
    """502 con el mismo cuerpo de siempre: {error, detail, id}."""
    logger.warning("%s id=%s: %s", error, id, exc)
    return JSONResponse(status_code=502, content={"error": error, "detail": str(exc), "id": id})


# --- HOME / EXPLORE ---

@router.get("/home", response_model=PaginatedResult[Section])
def get_home(yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_home(yt.browse(HOME_ID))
    except TransportError as e:
        return upstream_error("home_error", e)


@router.get("/home/continuation", response_model=PaginatedResult[Section])
def get_home_continuation(
    token: str = Query(..., description="continuationToken de la página anterior"),
    yt: InnerTubeClient = Depends(get_client),
):
    try:
        return parse_home_continuation(yt.browse_continuation(token))
    except TransportError as e:
        return upstream_error("home_error", e)


@router.get("/explore", response_model=PaginatedResult[Section])
def get_explore(yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_explore(yt.browse(EXPLORE_ID))
    except TransportError as e:
        return upstream_error("explore_error", e)


# --- SEARCH ---

@router.get("/search", response_model=SearchResponse)
def search_music(
    q: str = Query(..., description="Texto a buscar"),
    params: str | None = Query(None, description="Filtro opaco (solo canciones, álbumes...)"),
    yt: InnerTubeClient = Depends(get_client),
):
    try:
        return parse_search(yt.search(q, params=params))
    except TransportError as e:
        return upstream_error("search_error", e, q)


@router.get("/search/continuation", response_model=SearchResponse)
def search_continuation(token: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_search(yt.search_continuation(token))
    except TransportError as e:
        return upstream_error("search_error", e)


@router.get("/search/suggestions", response_model=list[SearchSuggestion])
def search_suggestions(q: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_search_suggestions(yt.search_suggestions(q))
    except TransportError as e:
        return upstream_error("suggestions_error", e, q)


# --- PLAYLIST ---

@router.get("/playlist/continuation", response_model=PaginatedResult[Song])
def get_playlist_continuation(token: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_playlist_continuation(yt.browse_continuation(token))
    except TransportError as e:
        return upstream_error("playlist_error", e)


@router.get("/playlist/{id}", response_model=PlaylistDetail)
def get_playlist(id: str = Path(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_playlist_detail(yt.browse(playlist_browse_id(id)), id)
    except TransportError as e:
        return upstream_error("playlist_error", e, id)


# --- ALBUM ---

def _album_payload(album_id: str, yt: InnerTubeClient):
    try:
        return parse_album_detail(yt.browse(album_id), album_id)
    except TransportError as e:
        return upstream_error("album_error", e, album_id)


@router.get("/album", response_model=AlbumDetail)
def get_album_q(id: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    return _album_payload(id, yt)


@router.get("/album/{id}", response_model=AlbumDetail)
def get_album_p(id: str = Path(...), yt: InnerTubeClient = Depends(get_client)):
    return _album_payload(id, yt)


# --- ARTIST ---

def _artist_payload(artist_id: str, yt: InnerTubeClient):
    try:
        return parse_artist_detail(yt.browse(artist_id), artist_id)
    except TransportError as e:
        return upstream_error("artist_error", e, artist_id)


@router.get("/artist", response_model=ArtistDetail)
def get_artist_q(id: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    return _artist_payload(id, yt)


@router.get("/artist/songs", response_model=PaginatedResult[Song])
def get_artist_songs(
    browse_id: str = Query(..., alias="browseId", description="songsBrowseId del artista"),
    params: str | None = Query(None, description="songsParams del artista"),
    yt: InnerTubeClient = Depends(get_client),
):
    try:
        return parse_artist_songs(yt.browse(browse_id, params=params))
    except TransportError as e:
        return upstream_error("artist_songs_error", e, browse_id)


@router.get("/artist/{id}", response_model=ArtistDetail)
def get_artist_p(id: str = Path(...), yt: InnerTubeClient = Depends(get_client)):
    return _artist_payload(id, yt)


# --- WATCH: letras, radio, metadata ---

@router.get("/lyrics/{video_id}", response_model=Lyrics)
def get_lyrics(video_id: str = Path(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        lyrics_id = extract_lyrics_browse_id(yt.next(video_id))
        if lyrics_id is None:
            return Lyrics.unavailable()
        return parse_lyrics(yt.browse(lyrics_id))
    except TransportError as e:
        return upstream_error("lyrics_error", e, video_id)


@router.get("/radio/continuation", response_model=PaginatedResult[Song])
def get_radio_continuation(token: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_radio_continuation(yt.next_continuation(token))
    except TransportError as e:
        return upstream_error("radio_error", e)


@router.get("/radio/{video_id}", response_model=PaginatedResult[Song])
def get_radio(
    video_id: str = Path(...),
    playlist_id: str | None = Query(None, alias="playlistId", description="Mix; por defecto RDAMVM<videoId>"),
    yt: InnerTubeClient = Depends(get_client),
):
    try:
        return parse_radio_queue(yt.next(video_id, playlist_id=playlist_id or f"RDAMVM{video_id}"))
    except TransportError as e:
        return upstream_error("radio_error", e, video_id)


@router.get("/song/{video_id}", response_model=Song)
def get_song(video_id: str = Path(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_song_metadata(yt.next(video_id), video_id)
    except TransportError as e:
        return upstream_error("song_error", e, video_id)
    except ParseError as e:
        return upstream_error("parse_error", e, video_id)
