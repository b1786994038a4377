# routes/debug.py
"""
Respuestas CRUDAS de YouTube Music (sin parsear). Sirven para ver qué
cambió cuando un parser empieza a devolver vacío.
"""
from fastapi import APIRouter, Depends, Query

from routes.music import upstream_error
from services.innertube_client import InnerTubeClient, TransportError, get_client
from utils.json_path import SECTION_LIST_PATHS, nav

router = APIRouter(tags=["debug"])


@router.get("/")
def debug_root():
    return {"message": "DEBUG route OK"}


@router.get("/search_debug")
def search_debug(q: str = Query(..., description="Texto a buscar"), yt: InnerTubeClient = Depends(get_client)):
    try:
        return yt.search(q)  # devolvemos todo, sin filtrar
    except TransportError as e:
        return upstream_error("search_error", e, q)


@router.get("/browse_debug")
def browse_debug(
    id: str = Query(..., description="browseId (artista, álbum, playlist, FEmusic_...)"),
    params: str | None = Query(None),
    yt: InnerTubeClient = Depends(get_client),
):
    try:
        return yt.browse(id, params=params)
    except TransportError as e:
        return upstream_error("browse_debug_error", e, id)


@router.get("/browse_debug_contents")
def browse_debug_contents(id: str = Query(..., description="browseId"), yt: InnerTubeClient = Depends(get_client)):
    """Solo el primer `sectionListRenderer.contents` que aparezca, con la ruta donde estaba."""
    try:
        response = yt.browse(id)
    except TransportError as e:
        return upstream_error("browse_debug_contents_error", e, id)

    for path in SECTION_LIST_PATHS:
        contents = nav(response, (*path, "contents"), list)
        if contents is not None:
            return {"id": id, "path": list(path), "contents": contents}
    return {"id": id, "path": None, "keys": sorted(response)}


@router.get("/next_debug")
def next_debug(id: str = Query(..., description="videoId"), yt: InnerTubeClient = Depends(get_client)):
    try:
        return yt.next(id)
    except TransportError as e:
        return upstream_error("next_debug_error", e, id)
