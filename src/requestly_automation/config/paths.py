"""Path utilities for the packaged extension artifacts."""

import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..constants import EXTENSION_FILES, DEFAULT_EXTENSION_TYPE
from .environment import get_env_config


_PACKAGE_EXTENSIONS_DIR = Path(__file__).resolve().parent.parent / "extensions"


class ExtensionType(str, Enum):
    """Packaged variants of the extension."""
    CRX = "crx"               # Chromium packed extension
    XPI = "xpi"               # Firefox add-on
    UNPACKED = "unpacked"     # directory for --load-extension


def get_extensions_dir(config: Optional[dict] = None) -> str:
    """
    Get the directory holding the extension artifacts.

    Uses REQUESTLY_EXTENSIONS_DIR if set, otherwise the extensions/
    directory shipped inside this package.
    """
    if config is None:
        config = get_env_config()

    override = config.get("extensions_dir")
    if override:
        return str(Path(override).expanduser().absolute())
    return str(_PACKAGE_EXTENSIONS_DIR)


def get_extension(extension_type: Union[str, ExtensionType] = DEFAULT_EXTENSION_TYPE, config: Optional[dict] = None) -> str:
    """
    Get the absolute path to the requested extension file.

    Args:
        extension_type: "crx", "xpi" or "unpacked". Anything else falls back to "crx".
        config: Environment configuration (read from the environment if None)

    Returns:
        Absolute path to the extension file or unpacked directory
    """
    key = extension_type.value if isinstance(extension_type, ExtensionType) else extension_type
    file_name = EXTENSION_FILES.get(key) if isinstance(key, str) else None
    if file_name is None:
        file_name = EXTENSION_FILES[DEFAULT_EXTENSION_TYPE]
    return os.path.join(get_extensions_dir(config), file_name)
