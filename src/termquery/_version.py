"""Version of the installed termquery distribution."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

DISTRIBUTION = "termquery"


def get_version() -> str:
    """Installed version, or ``0.0.0`` when running from an uninstalled checkout."""
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
