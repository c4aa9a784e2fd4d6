"""Domain errors mapped to HTTP responses in ``launderette.main``."""


class DirectoryError(Exception):
    """Base class; ``status_code`` is what the API answers with."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DirectoryError):
    status_code = 404

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class ConflictError(DirectoryError):
    status_code = 409


class AuthError(DirectoryError):
    status_code = 401


class GeocodingError(DirectoryError):
    """Upstream geocoder failed (network error, bad status, bad payload)."""

    status_code = 500


class BadRequestError(DirectoryError):
    status_code = 400
