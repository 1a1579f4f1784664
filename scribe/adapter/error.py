"""Infrastructure layer errors."""

from scribe.domain.error import StorageError


class AssetStoreError(StorageError):
    """Object storage API error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
