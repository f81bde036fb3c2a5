"""
envstruct Paths

Locations of user-level envstruct files.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".envstruct"


def get_data_path() -> Path:
    """Get the envstruct data directory path.

    ENVSTRUCT_DATA_PATH overrides the default of ~/.envstruct.
    """
    data_path = os.environ.get("ENVSTRUCT_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH
