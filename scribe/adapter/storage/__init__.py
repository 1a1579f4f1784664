"""Object storage adapter."""

from .supabase import MockAssetStore, SupabaseAssetStore

__all__ = ["SupabaseAssetStore", "MockAssetStore"]
