"""Helpers and request bodies backing :mod:`kforge_providers.service.app`."""
