"""Version lookup for enu."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Get version from installed metadata, falling back to a source checkout's pyproject.toml."""
    try:
        return _metadata_version("enu")
    except PackageNotFoundError:
        pass
    if _PYPROJECT.exists():
        with open(_PYPROJECT, "rb") as f:
            return str(tomllib.load(f).get("project", {}).get("version", "0.0.0"))
    return "0.0.0"
