"""REST adapter for the outpass store."""

from hostel_outpass.adapters.store.http_client import OutpassHttpClient
from hostel_outpass.adapters.store.outpass_parser import OutpassParser
from hostel_outpass.adapters.store.rest_outpass_store import RestOutpassStore

__all__ = ["OutpassHttpClient", "OutpassParser", "RestOutpassStore"]
