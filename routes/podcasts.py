# routes/podcasts.py
from fastapi import APIRouter, Depends, Path, Query

from models.entities import PodcastEpisode
from models.responses import PaginatedResult, PodcastSection, PodcastShowDetail
from routes.music import upstream_error
from services.innertube_client import InnerTubeClient, TransportError, get_client
from utils.podcast_parser import (
    parse_episodes_continuation,
    parse_podcast_continuation,
    parse_podcast_discovery,
    parse_show_detail,
)

router = APIRouter(tags=["podcasts"])

PODCASTS_ID = "FEmusic_podcasts"


@router.get("/", response_model=PaginatedResult[PodcastSection])
def get_podcasts(yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_podcast_discovery(yt.browse(PODCASTS_ID))
    except TransportError as e:
        return upstream_error("podcasts_error", e)


@router.get("/continuation", response_model=PaginatedResult[PodcastSection])
def get_podcasts_continuation(token: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_podcast_continuation(yt.browse_continuation(token))
    except TransportError as e:
        return upstream_error("podcasts_error", e)


@router.get("/show/episodes/continuation", response_model=PaginatedResult[PodcastEpisode])
def get_episodes_continuation(token: str = Query(...), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_episodes_continuation(yt.browse_continuation(token))
    except TransportError as e:
        return upstream_error("episodes_error", e)


@router.get("/show/{id}", response_model=PodcastShowDetail)
def get_show(id: str = Path(..., description="browseId del show (MPSPP...)"), yt: InnerTubeClient = Depends(get_client)):
    try:
        return parse_show_detail(yt.browse(id), id)
    except TransportError as e:
        return upstream_error("show_error", e, id)
