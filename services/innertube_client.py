# services/innertube_client.py
"""
Transporte hacia YouTube Music. Solo hace el request y devuelve el JSON
crudo; el parseo vive en utils/. Cualquier error de la librería sale como
TransportError con el nombre del endpoint.
"""
import logging

from innertube import InnerTube

import config

logger = logging.getLogger(__name__)


class TransportError(Exception):
    def __init__(self, endpoint: str, detail: str):
        super().__init__(f"{endpoint}: {detail}")
        self.endpoint = endpoint
        self.detail = detail


class InnerTubeClient:
    def __init__(self, client_name: str = config.INNERTUBE_CLIENT):
        self.client_name = client_name
        self._client = InnerTube(client_name)

    def _call(self, endpoint: str, fn, *args, **kwargs) -> dict:
        try:
            response = fn(*args, **kwargs)
        except Exception as e:
            logger.warning("InnerTube %s falló: %s", endpoint, e)
            raise TransportError(endpoint, str(e)) from e
        if not isinstance(response, dict):
            raise TransportError(endpoint, f"respuesta inesperada ({type(response).__name__})")
        return response

    def browse(self, browse_id: str, params: str | None = None) -> dict:
        return self._call("browse", self._client.browse, browse_id, params=params)

    def browse_continuation(self, token: str) -> dict:
        return self._call("browse", self._client.browse, continuation=token)

    def search(self, query: str, params: str | None = None) -> dict:
        return self._call("search", self._client.search, query, params=params)

    def search_continuation(self, token: str) -> dict:
        return self._call("search", self._client.search, continuation=token)

    def next(self, video_id: str | None = None, playlist_id: str | None = None, params: str | None = None) -> dict:
        return self._call(
            "next", self._client.next, video_id=video_id, playlist_id=playlist_id, params=params
        )

    def next_continuation(self, token: str) -> dict:
        return self._call("next", self._client.next, continuation=token)

    def search_suggestions(self, query: str) -> dict:
        return self._call("music/get_search_suggestions", self._client.music_get_search_suggestions, query)


_client: InnerTubeClient | None = None


def get_client() -> InnerTubeClient:
    """Instancia compartida, creada a demanda (dependencia de FastAPI)."""
    global _client
    if _client is None:
        _client = InnerTubeClient()
    return _client
