"""Featured image asset domain service."""

import mimetypes
from uuid import uuid4

import logfire

from scribe.config import StorageSettings
from scribe.domain.error import NotAuthorizedError, StorageError, ValidationError
from scribe.domain.value import UserId

from .base import Service

_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


class AssetStore:
    """Object storage interface for uploaded assets."""

    async def store(self, path: str, data: bytes, content_type: str) -> str:
        """Store an object.

        Args:
            path: Object path inside the bucket
            data: Raw bytes
            content_type: MIME type of the data

        Returns:
            Public URL of the stored object

        Raises:
            StorageError: If the store rejects the upload
        """
        raise NotImplementedError

    async def delete(self, path: str) -> None:
        """Delete an object by its path inside the bucket.

        Raises:
            StorageError: If the store fails to delete the object
        """
        raise NotImplementedError

    def url_to_path(self, url: str) -> str:
        """Map a public URL back to its object path.

        Values that are not public URLs of this store are returned unchanged,
        so stored paths pass straight through.
        """
        raise NotImplementedError


class AssetService(Service):
    """Domain service for uploading and discarding featured images."""

    def __init__(self, asset_store: AssetStore, storage_settings: StorageSettings) -> None:
        """Initialize asset service.

        Args:
            asset_store: Object storage backend
            storage_settings: Upload limits
        """
        self.asset_store = asset_store
        self.storage_settings = storage_settings

    async def upload(
        self,
        owner_id: UserId,
        data: bytes,
        content_type: str,
        file_name: str | None = None,
    ) -> str:
        """Upload an image under the owner's folder.

        Args:
            owner_id: Uploading user; objects are stored under ``<owner_id>/``
            data: Image bytes
            content_type: MIME type declared by the client
            file_name: Original file name, only used to pick an extension

        Returns:
            Public URL of the uploaded image

        Raises:
            ValidationError: If the type is not allowed or the size is out of range
            StorageError: If the store rejects the upload
        """
        with logfire.span(
            "asset_service.upload",
            owner_id=str(owner_id),
            content_type=content_type,
            size=len(data),
        ):
            if content_type not in self.storage_settings.allowed_content_types:
                logfire.warn("Rejected upload content type", content_type=content_type)
                raise ValidationError(f"Unsupported image type: {content_type}")
            if not data:
                raise ValidationError("Image is empty")
            if len(data) > self.storage_settings.max_upload_bytes:
                logfire.warn(
                    "Rejected oversized upload",
                    size=len(data),
                    max_size=self.storage_settings.max_upload_bytes,
                )
                raise ValidationError(
                    f"Image exceeds {self.storage_settings.max_upload_bytes} bytes"
                )

            path = f"{owner_id}/{uuid4()}.{self._extension(content_type, file_name)}"
            url = await self.asset_store.store(path, data, content_type)
            logfire.info("Image uploaded", owner_id=str(owner_id), path=path)
            return url

    async def discard(self, url_or_path: str) -> bool:
        """Delete an asset without failing the caller.

        Storage errors are logged and swallowed; an orphaned object is
        preferable to failing an operation that already succeeded.

        Returns:
            True if the asset was deleted
        """
        path = self.asset_store.url_to_path(url_or_path)
        with logfire.span("asset_service.discard", path=path):
            try:
                await self.asset_store.delete(path)
            except StorageError as e:
                logfire.error("Failed to delete asset", path=path, error=str(e))
                return False
            logfire.info("Asset deleted", path=path)
            return True

    async def remove(self, owner_id: UserId, url_or_path: str) -> str:
        """Delete one of the owner's uploads, for images dropped before saving.

        Args:
            owner_id: Requesting user; only paths under ``<owner_id>/`` qualify
            url_or_path: Public URL or object path of the image

        Returns:
            The deleted object path

        Raises:
            NotAuthorizedError: If the path is outside the owner's folder
            StorageError: If the store fails to delete the object
        """
        path = self.asset_store.url_to_path(url_or_path)
        with logfire.span("asset_service.remove", owner_id=str(owner_id), path=path):
            folder, _, rest = path.partition("/")
            if folder != str(owner_id) or not rest or ".." in rest.split("/"):
                logfire.warn(
                    "Image removal denied", owner_id=str(owner_id), path=path
                )
                raise NotAuthorizedError("image", path, str(owner_id))

            await self.asset_store.delete(path)
            logfire.info("Image removed", owner_id=str(owner_id), path=path)
            return path

    def url_to_path(self, url: str) -> str:
        return self.asset_store.url_to_path(url)

    @staticmethod
    def _extension(content_type: str, file_name: str | None) -> str:
        if file_name and "." in file_name:
            ext = file_name.rsplit(".", 1)[1].lower()
            if ext.isalnum():
                return ext
        if content_type in _EXTENSIONS:
            return _EXTENSIONS[content_type]
        guessed = mimetypes.guess_extension(content_type) or ".bin"
        return guessed.lstrip(".")
