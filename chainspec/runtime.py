"""
Source of the runtime blob presets embed in genesis.

The blob is produced by the runtime build and located through the
CHAINSPEC_WASM_PATH environment variable. WASM_BINARY is None when the
deployment was built without one.
"""

import logging
import os
from typing import Optional

from chainspec.config import WASM_PATH_ENV

logger = logging.getLogger(__name__)


def load_wasm_binary(path: Optional[str] = None) -> Optional[bytes]:
    """Read the runtime blob from `path` or the configured location, if any."""
    path = path or os.environ.get(WASM_PATH_ENV)
    if not path:
        return None

    if not os.path.isfile(path):
        logger.warning("Runtime blob not found at %s", path)
        return None

    with open(path, "rb") as f:
        blob = f.read()
    logger.info("Loaded runtime blob from %s (%d bytes)", path, len(blob))
    return blob


WASM_BINARY = load_wasm_binary()
