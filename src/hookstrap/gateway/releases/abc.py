"""Abstract client for upstream release metadata and artifact downloads."""

from abc import ABC, abstractmethod
from pathlib import Path


class ReleaseLookupError(RuntimeError):
    """The release API or the artifact download could not be used."""


class ReleaseClient(ABC):
    @abstractmethod
    def get_latest_tag(self, repo: str) -> str:
        """Return the tag name of the latest release of ``owner/name``.

        Raises:
            ReleaseLookupError: If the API request fails or has no tag_name
        """
        ...

    @abstractmethod
    def download(self, url: str, destination: Path) -> None:
        """Download ``url`` to ``destination``, creating parent directories.

        The file appears at ``destination`` only once the download completed.

        Raises:
            ReleaseLookupError: If the download fails
        """
        ...
