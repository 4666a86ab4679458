"""Repositories for provider-layer persistent state."""

from .credentials import CredentialStore, get_credential_store, set_credential_store

__all__ = ["CredentialStore", "get_credential_store", "set_credential_store"]
