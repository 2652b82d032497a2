"""Version-pinned checkstyle jar download.

The jar filename embeds the upstream version, so an existing file means that
exact release is installed and a new upstream release yields a new filename.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from hookstrap.gateway.releases.abc import ReleaseClient, ReleaseLookupError

logger = logging.getLogger(__name__)

CHECKSTYLE_REPO = "checkstyle/checkstyle"
CHECKSTYLE_TAG_PREFIX = "checkstyle-"
CHECKSTYLE_ALIAS_GUARD = "alias checkstyle="


@dataclass(frozen=True)
class CheckstyleInstall:
    version: str
    jar_path: Path
    downloaded: bool


def parse_checkstyle_version(tag: str) -> str:
    """Extract the version from a checkstyle release tag.

    Example:
        >>> parse_checkstyle_version("checkstyle-10.21.4")
        '10.21.4'
    """
    if not tag.startswith(CHECKSTYLE_TAG_PREFIX) or tag == CHECKSTYLE_TAG_PREFIX:
        raise ReleaseLookupError(f"Unexpected checkstyle release tag: {tag!r}")
    return tag.removeprefix(CHECKSTYLE_TAG_PREFIX)


def checkstyle_jar_name(version: str) -> str:
    return f"checkstyle-{version}-all.jar"


def checkstyle_download_url(version: str) -> str:
    return (
        f"https://github.com/{CHECKSTYLE_REPO}/releases/download/"
        f"{CHECKSTYLE_TAG_PREFIX}{version}/{checkstyle_jar_name(version)}"
    )


def checkstyle_alias_line(jar_path: Path) -> str:
    return f"alias checkstyle='java -jar {jar_path}'"


def fetch_checkstyle(install_dir: Path, *, releases: ReleaseClient) -> CheckstyleInstall:
    """Download the latest checkstyle jar into ``install_dir`` unless present."""
    version = parse_checkstyle_version(releases.get_latest_tag(CHECKSTYLE_REPO))
    jar_path = install_dir / checkstyle_jar_name(version)
    if jar_path.exists():
        logger.debug("checkstyle jar already at %s", jar_path)
        return CheckstyleInstall(version=version, jar_path=jar_path, downloaded=False)

    releases.download(checkstyle_download_url(version), jar_path)
    return CheckstyleInstall(version=version, jar_path=jar_path, downloaded=True)
