"""Persist rendered SDL to disk."""

import logging
from pathlib import Path

from .errors import EmptyOutputError

logger = logging.getLogger(__name__)


def write_sdl(sdl: str, path: str | Path) -> Path:
    """Write `sdl` to `path` as UTF-8, byte for byte.

    Raises:
        EmptyOutputError: If `sdl` is empty; no file is created
    """
    if not sdl:
        raise EmptyOutputError("No introspection result available to write")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = sdl.encode("utf-8")
    output_path.write_bytes(data)
    logger.info("Wrote %d bytes of SDL to %s", len(data), output_path)
    return output_path
