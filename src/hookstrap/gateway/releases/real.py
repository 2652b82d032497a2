"""GitHub releases client built on urllib."""

import json
import logging
import shutil
import urllib.error
import urllib.request
from pathlib import Path

from hookstrap.gateway.releases.abc import ReleaseClient, ReleaseLookupError

logger = logging.getLogger(__name__)

_USER_AGENT = "hookstrap"
_TIMEOUT_SECONDS = 60


class GitHubReleaseClient(ReleaseClient):
    BASE_URL = "https://api.github.com/repos"

    def get_latest_tag(self, repo: str) -> str:
        url = f"{self.BASE_URL}/{repo}/releases/latest"
        logger.debug("GET %s", url)
        request = urllib.request.Request(
            url,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": _USER_AGENT,
            },
        )
        try:
            with urllib.request.urlopen(request, timeout=_TIMEOUT_SECONDS) as response:
                data = json.loads(response.read().decode("utf-8"))
        except urllib.error.HTTPError as e:
            raise ReleaseLookupError(
                f"GitHub API error ({e.code}) fetching latest release of {repo}"
            ) from e
        except urllib.error.URLError as e:
            raise ReleaseLookupError(
                f"Could not reach GitHub fetching latest release of {repo}: {e.reason}"
            ) from e

        tag = data.get("tag_name") if isinstance(data, dict) else None
        if not isinstance(tag, str) or not tag:
            raise ReleaseLookupError(f"Latest release of {repo} has no tag_name")
        return tag

    def download(self, url: str, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        partial = destination.with_name(destination.name + ".part")
        logger.debug("download %s -> %s", url, destination)
        request = urllib.request.Request(url, headers={"User-Agent": _USER_AGENT})
        try:
            with urllib.request.urlopen(request, timeout=_TIMEOUT_SECONDS) as response:
                with partial.open("wb") as out:
                    shutil.copyfileobj(response, out)
        except urllib.error.URLError as e:
            partial.unlink(missing_ok=True)
            raise ReleaseLookupError(f"Failed to download {url}: {e}") from e

        # Rename last so an interrupted download never looks installed
        partial.replace(destination)
