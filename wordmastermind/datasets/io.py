from __future__ import annotations
import json
from pathlib import Path
from typing import Any, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_json(p: Path | str) -> Any:
    """
    Parse a UTF-8 JSON file.
    Raises FileNotFoundError if the path doesn't exist and
    json.JSONDecodeError if the content is not valid JSON.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)
