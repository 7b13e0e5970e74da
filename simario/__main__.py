"""Allow ``python -m simario``."""

from .cli import app

if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
