"""Write the credits as a JavaScript assignment the static page can load."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Union

from .models import DisplayLine

logger = logging.getLogger(__name__)

DATA_VARIABLE = "data"


def render_data_js(lines: Iterable[DisplayLine]) -> str:
    rows = [line.as_row() for line in lines]
    payload = json.dumps(rows, ensure_ascii=False, separators=(",", ":"))
    return f"const {DATA_VARIABLE} = {payload}\n"


def write_data_js(lines: Iterable[DisplayLine], path: Union[str, Path]) -> Path:
    """
    Write ``const data = [...]`` to ``path``.

    Goes through a temp file in the same directory so a reader never sees a
    half-written file.
    """
    path = Path(path)
    content = render_data_js(lines)
    directory = path.parent if str(path.parent) else Path(".")
    directory.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise

    logger.info(f"Wrote {path}")
    return path
