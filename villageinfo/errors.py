"""Error taxonomy shared by the services and the HTTP layer."""

from __future__ import annotations


class VillageInfoError(Exception):
    """Base exception for every failure surfaced to API callers."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class InvalidRequest(VillageInfoError):
    """Raised when a client omits or blanks a required field."""

    status_code = 400


class NotFound(VillageInfoError):
    """Raised when a state dataset or village does not exist."""

    status_code = 404


class UpstreamError(VillageInfoError):
    """Raised when the generative API fails or returns unusable content."""

    status_code = 500


class InternalError(VillageInfoError):
    """Raised on local file-system or dataset parse failures."""

    status_code = 500
