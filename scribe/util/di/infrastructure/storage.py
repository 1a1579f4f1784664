"""Object storage infrastructure providers."""

from dishka import Scope, provide

from scribe.adapter.storage import SupabaseAssetStore
from scribe.config import StorageSettings
from scribe.domain.service.asset_service import AssetStore
from scribe.util.di.base import ProviderBase
from scribe.util.observability import instrument_httpx


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using Supabase Storage."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_asset_store(self, storage_settings: StorageSettings) -> AssetStore:
        """Provide storage API client.

        Raises:
            ValueError: If the storage URL is not configured
        """
        if not storage_settings.url:
            raise ValueError("Storage URL must be configured")

        # Trace outgoing storage API calls
        instrument_httpx()

        return SupabaseAssetStore(
            base_url=storage_settings.url,
            service_key=storage_settings.service_key,
            bucket=storage_settings.bucket,
            timeout=storage_settings.timeout,
        )
