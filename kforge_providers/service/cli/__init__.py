"""KForge providers CLI (package entrypoint).

Wires argument parsing to the action handlers in ``cli_actions``. Performs no
provider logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from ...base.logging import configure_logger
from .cli_actions import handle_generate, handle_keys, handle_ollama_models, handle_providers
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 when the envelope reports an error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.log_level:
        configure_logger(level=args.log_level)

    if args.cmd == "providers":
        return handle_providers(args)
    if args.cmd == "generate":
        return handle_generate(args)
    if args.cmd == "keys":
        return handle_keys(args)
    return handle_ollama_models(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
