"""
vendors/factory.py - Vendor Client Factory

Single place that builds the clients for external providers. Services call
these functions instead of instantiating clients, so a test can swap a
provider for a fake by patching one function.
"""

# Vendors
from .storage.storage_client import StorageClient
from .supabase.auth_client import SupabaseAuthClient
from .cloudflare.stream_client import CloudflareStreamClient





def get_storage_client() -> StorageClient:
    return StorageClient()


def get_auth_client() -> SupabaseAuthClient:
    return SupabaseAuthClient()


def get_stream_client() -> CloudflareStreamClient:
    return CloudflareStreamClient()
