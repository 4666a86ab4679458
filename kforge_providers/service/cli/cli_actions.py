"""CLI action handlers.

Each handler calls one boundary command from
:mod:`kforge_providers.service.commands`, prints the resulting envelope as
JSON on stdout and returns the process exit code (0 when ``ok``).
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional, TextIO

from ...config import get_model
from .. import commands


def emit(envelope: Dict[str, Any], out: Optional[TextIO] = None) -> int:
    """Print ``envelope`` and return the matching exit code."""
    stream = out if out is not None else sys.stdout
    stream.write(json.dumps(envelope, ensure_ascii=False) + "\n")
    return 0 if envelope.get("ok") else 1


def handle_providers(args: argparse.Namespace) -> int:
    return emit(commands.list_providers())


def build_generate_request(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate parsed ``generate`` flags into a request dict."""
    model = args.model if args.model is not None else (get_model(args.provider) or "")
    request: Dict[str, Any] = {"provider_id": args.provider, "model": model, "input": args.input}
    for key in ("system", "temperature", "max_output_tokens", "endpoint"):
        value = getattr(args, key)
        if value is not None:
            request[key] = value
    return request


def handle_generate(args: argparse.Namespace) -> int:
    return emit(commands.generate(build_generate_request(args)))


def handle_keys(args: argparse.Namespace, stdin: Optional[TextIO] = None) -> int:
    """Dispatch ``keys set|clear|status``.

    ``keys set`` reads the secret from the first line of stdin when
    ``--api-key`` is not given.
    """
    if args.keys_cmd == "set":
        secret = args.api_key
        if secret is None:
            secret = (stdin if stdin is not None else sys.stdin).readline()
        return emit(commands.set_credential(args.provider, secret))
    if args.keys_cmd == "clear":
        return emit(commands.clear_credential(args.provider))
    return emit(commands.credential_status(args.provider))


def handle_ollama_models(args: argparse.Namespace) -> int:
    return emit(commands.ollama_list_models(args.endpoint))


__all__ = [
    "emit",
    "build_generate_request",
    "handle_providers",
    "handle_generate",
    "handle_keys",
    "handle_ollama_models",
]
