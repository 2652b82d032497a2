from pathlib import Path

from hookstrap.gateway.releases.abc import ReleaseClient, ReleaseLookupError


class FakeReleaseClient(ReleaseClient):
    """In-memory release client.

    Downloads write ``content`` to the destination so that reruns observe
    the artifact exactly as they would after a real download.
    """

    def __init__(self, *, latest_tags: dict[str, str], content: bytes) -> None:
        self._latest_tags = latest_tags
        self._content = content
        self._tag_requests: list[str] = []
        self._downloads: list[tuple[str, Path]] = []

    def get_latest_tag(self, repo: str) -> str:
        self._tag_requests.append(repo)
        if repo not in self._latest_tags:
            raise ReleaseLookupError(f"Latest release of {repo} has no tag_name")
        return self._latest_tags[repo]

    def download(self, url: str, destination: Path) -> None:
        self._downloads.append((url, destination))
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(self._content)

    @property
    def tag_requests(self) -> list[str]:
        return list(self._tag_requests)

    @property
    def downloads(self) -> list[tuple[str, Path]]:
        return list(self._downloads)
