from pathlib import Path

from hookstrap.gateway.releases.abc import ReleaseClient
from hookstrap.output import user_output


class DryRunReleaseClient(ReleaseClient):
    """Looks up release metadata for real but never downloads."""

    def __init__(self, wrapped: ReleaseClient) -> None:
        self._wrapped = wrapped

    def get_latest_tag(self, repo: str) -> str:
        return self._wrapped.get_latest_tag(repo)

    def download(self, url: str, destination: Path) -> None:
        user_output(f"[DRY RUN] Would download {url} to {destination}")
