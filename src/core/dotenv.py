from __future__ import annotations

import os
from pathlib import Path
from typing import Dict


def parse_dotenv(content: str) -> Dict[str, str]:
    """
    Parse dotenv text into a dict (no python-dotenv dependency).
    - Supports: KEY=VALUE and `export KEY=VALUE`
    - Supports: # comments, full-line and inline (inline only for unquoted values)
    - Supports: quoted VALUE (single/double quotes)
    """
    out: Dict[str, str] = {}
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        k, v = line.split("=", 1)
        k = k.strip()
        v = v.strip()

        if k.startswith("export "):
            k = k[len("export ") :].strip()
        if not k:
            continue

        is_quoted = len(v) >= 2 and ((v[0] == v[-1] == '"') or (v[0] == v[-1] == "'"))
        if is_quoted:
            v = v[1:-1]
        elif "#" in v:
            v = v.split("#", 1)[0].strip()

        out[k] = v
    return out


def load_dotenv(dotenv_path: str = ".env", override: bool = False) -> bool:
    """
    Copy the variables of `dotenv_path` into os.environ.

    Returns False when the file does not exist. Existing variables win unless
    `override` is set.
    """
    p = Path(dotenv_path)
    if not p.is_file():
        return False

    for k, v in parse_dotenv(p.read_text(encoding="utf-8", errors="ignore")).items():
        if not override and k in os.environ:
            continue
        os.environ[k] = v
    return True
