# models/errors.py


class ParseError(Exception):
    """
    Fallo "duro" del parser. Solo se usa donde el llamador necesita la
    entidad completa (metadata de una canción); el resto degrada a vacío.
    """

    def __init__(self, message: str, video_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.video_id = video_id

    def __str__(self):
        if self.video_id:
            return f"{self.message} (videoId={self.video_id})"
        return self.message
