from __future__ import annotations

from .app.cli import app

if __name__ == "__main__":  # pragma: no cover - manual invocation hook
    app(prog_name="filecache")
