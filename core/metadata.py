import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

SERVICE_NAME = "adwords-campaigns"

CHANGELOG = Path(__file__).resolve().parent.parent / "CHANGELOG.md"


def _changelog_version() -> str:
    if not CHANGELOG.exists():
        return "unknown"
    match = re.search(r"##\s*\[(.+?)\]", CHANGELOG.read_text())
    return match.group(1) if match else "unknown"


def _read_version() -> str:
    """Installed distribution version, else the newest CHANGELOG entry."""
    try:
        return version(SERVICE_NAME)
    except PackageNotFoundError:
        return _changelog_version()


VERSION = _read_version()
