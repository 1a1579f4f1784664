"""Supabase Storage client.

Stores featured images in a public bucket through the storage REST API:

- upload: ``POST /storage/v1/object/<bucket>/<path>``
- delete: ``DELETE /storage/v1/object/<bucket>`` with ``{"prefixes": [path]}``
- public URL: ``/storage/v1/object/public/<bucket>/<path>``
"""

import httpx
import logfire

from scribe.adapter.error import AssetStoreError
from scribe.domain.service.asset_service import AssetStore


def _public_prefix(base_url: str, bucket: str) -> str:
    return f"{base_url.rstrip('/')}/storage/v1/object/public/{bucket}/"


def _path_from_url(url: str, prefix: str) -> str:
    if url.startswith(prefix):
        return url[len(prefix):]
    return url


class SupabaseAssetStore(AssetStore):
    """Asset store backed by a Supabase Storage bucket."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        bucket: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize storage client.

        Args:
            base_url: Project URL, e.g. https://<project>.supabase.co
            service_key: Service role key used as bearer token
            bucket: Bucket holding the images
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.bucket = bucket
        self.timeout = timeout
        self.transport = transport

        self.object_url = f"{self.base_url}/storage/v1/object"
        self.public_prefix = _public_prefix(self.base_url, bucket)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self.service_key}",
                "apikey": self.service_key,
            },
            timeout=self.timeout,
            transport=self.transport,
        )

    async def store(self, path: str, data: bytes, content_type: str) -> str:
        """Upload an object and return its public URL.

        Raises:
            AssetStoreError: If the upload fails
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    f"{self.object_url}/{self.bucket}/{path}",
                    content=data,
                    headers={
                        "Content-Type": content_type,
                        "Cache-Control": "max-age=3600",
                        "x-upsert": "false",
                    },
                )
        except httpx.HTTPError as e:
            logfire.error("Storage upload HTTP error", path=path, error=str(e))
            raise AssetStoreError(f"HTTP error during upload: {e}")

        if response.status_code not in (200, 201):
            logfire.error(
                "Storage upload failed",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise AssetStoreError(
                f"Upload failed: {response.status_code}", response.status_code
            )

        logfire.info("Object stored", bucket=self.bucket, path=path)
        return f"{self.public_prefix}{path}"

    async def delete(self, path: str) -> None:
        """Delete an object from the bucket.

        Raises:
            AssetStoreError: If the delete fails
        """
        try:
            async with self._client() as client:
                response = await client.request(
                    "DELETE",
                    f"{self.object_url}/{self.bucket}",
                    json={"prefixes": [path]},
                )
        except httpx.HTTPError as e:
            logfire.error("Storage delete HTTP error", path=path, error=str(e))
            raise AssetStoreError(f"HTTP error during delete: {e}")

        if response.status_code != 200:
            logfire.error(
                "Storage delete failed",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise AssetStoreError(
                f"Delete failed: {response.status_code}", response.status_code
            )

        logfire.info("Object deleted", bucket=self.bucket, path=path)

    def url_to_path(self, url: str) -> str:
        return _path_from_url(url, self.public_prefix)


class MockAssetStore(AssetStore):
    """In-memory asset store for testing.

    Keeps uploaded objects in a dict and builds the same public URLs as the
    real store. Set ``fail_deletes`` to simulate a storage outage.
    """

    def __init__(self, base_url: str = "http://storage.test", bucket: str = "post-images"):
        """Initialize mock store without a real storage backend."""
        self.bucket = bucket
        self.public_prefix = _public_prefix(base_url, bucket)
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.deleted: list[str] = []
        self.fail_deletes = False

    async def store(self, path: str, data: bytes, content_type: str) -> str:
        self.objects[path] = (data, content_type)
        return f"{self.public_prefix}{path}"

    async def delete(self, path: str) -> None:
        if self.fail_deletes:
            raise AssetStoreError("Simulated storage outage", 503)
        self.objects.pop(path, None)
        self.deleted.append(path)

    def url_to_path(self, url: str) -> str:
        return _path_from_url(url, self.public_prefix)
