"""CLI parser construction for kforge-providers.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...config.defaults import PROVIDER_CLI_DEFAULT_PROVIDER


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return n


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Subcommands: ``providers``, ``generate``, ``keys set|clear|status`` and
    ``ollama-models``. No I/O happens here.
    """
    p = argparse.ArgumentParser(
        prog="kforge-providers", description="KForge provider layer CLI (prints JSON envelopes)"
    )
    p.add_argument("--log-level", default=None, help="Override KFORGE_LOG_LEVEL for this run")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("providers", help="List registered providers and model suggestions")

    p_gen = sub.add_parser("generate", help="Run one single-turn generation")
    p_gen.add_argument("--provider", default=PROVIDER_CLI_DEFAULT_PROVIDER)
    p_gen.add_argument("--model", default=None, help="Defaults to the provider's configured model")
    p_gen.add_argument("--input", required=True)
    p_gen.add_argument("--system", default=None)
    p_gen.add_argument("--temperature", type=float, default=None)
    p_gen.add_argument("--max-output-tokens", type=_non_negative_int, default=None)
    p_gen.add_argument("--endpoint", default=None, help="Base URL override")

    p_keys = sub.add_parser("keys", help="Manage API keys in the secure store")
    keys_sub = p_keys.add_subparsers(dest="keys_cmd", required=True)
    p_set = keys_sub.add_parser("set", help="Store a key (read from stdin when --api-key is omitted)")
    p_set.add_argument("provider")
    p_set.add_argument("--api-key", default=None)
    p_clear = keys_sub.add_parser("clear", help="Forget a stored key")
    p_clear.add_argument("provider")
    p_status = keys_sub.add_parser("status", help="Show whether a key is available and persisted")
    p_status.add_argument("provider")

    p_ollama = sub.add_parser("ollama-models", help="List models installed in Ollama")
    p_ollama.add_argument("--endpoint", default=None)

    return p


__all__ = ["build_parser"]
