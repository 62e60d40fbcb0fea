"""Version lookup for agixtsdk.

Installed package metadata wins; a source checkout that was never installed
reads ``[project].version`` from the pyproject.toml next to the package.
"""

import tomllib
from functools import lru_cache
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "agixtsdk"
UNKNOWN_VERSION = "0+unknown"

_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    if not pyproject.is_file():
        return None
    with pyproject.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    # Ignore a pyproject.toml from an enclosing project
    if project.get("name") != DISTRIBUTION_NAME:
        return None
    return project.get("version")


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the agixtsdk version string, e.g. "0.1.0"."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _checkout_version(_PYPROJECT) or UNKNOWN_VERSION
