"""Service surfaces (boundary commands, FastAPI app, CLI) for providers."""
