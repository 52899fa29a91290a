from __future__ import annotations

"""
Root entrypoint: HTTP calculator server.

Rule: the project root keeps only this `main.py`; all other implementation lives in packages.
The interactive calculator is started with `python -m scripts.run_repl`.
"""

import uvicorn

from src.core.settings import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run("src.api.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
