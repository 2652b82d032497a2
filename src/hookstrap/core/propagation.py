"""Propagation of the root hook configuration into nested git repositories."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from hookstrap.core.artifacts import PRE_COMMIT_CONFIG_FILENAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkResult:
    repo_dir: Path
    link_path: Path


def discover_git_repos(root: Path) -> list[Path]:
    """Find every directory under ``root`` (inclusive) holding a ``.git`` directory.

    ``.git`` directories themselves are not descended into and symlinked
    directories are not followed.

    Returns:
        Repository directories sorted by path
    """
    repos: list[Path] = []
    for dirpath, dirnames, _filenames in os.walk(root):
        if ".git" in dirnames:
            repos.append(Path(dirpath))
            dirnames.remove(".git")
    return sorted(repos)


class PropagationError(RuntimeError):
    """Raised when a nested repository's config path cannot be replaced by a link."""


def is_root_config_location(root_config: Path, repo_dir: Path) -> bool:
    """Whether ``repo_dir``'s hook config path is ``root_config`` itself."""
    return repo_dir.resolve() / PRE_COMMIT_CONFIG_FILENAME == root_config.resolve()


def link_config(root_config: Path, repo_dir: Path) -> LinkResult | None:
    """Point ``repo_dir``'s hook config at ``root_config`` with a symlink.

    An existing file or link at the link path is replaced. Returns None, leaving
    the file alone, when the link path is ``root_config`` itself.

    Raises:
        PropagationError: When a directory occupies the link path
    """
    link_path = repo_dir / PRE_COMMIT_CONFIG_FILENAME
    if is_root_config_location(root_config, repo_dir):
        logger.debug("skipping %s: it is the root config", link_path)
        return None

    if link_path.is_dir() and not link_path.is_symlink():
        raise PropagationError(
            f"Cannot link config into {repo_dir}: {link_path} is a directory. "
            "Remove it and rerun."
        )
    if link_path.is_symlink() or link_path.exists():
        link_path.unlink()
    link_path.symlink_to(root_config.resolve())
    return LinkResult(repo_dir=repo_dir, link_path=link_path)


def propagate_config(root: Path, root_config: Path) -> list[LinkResult]:
    """Link ``root_config`` into every git repository found under ``root``."""
    results: list[LinkResult] = []
    for repo_dir in discover_git_repos(root):
        result = link_config(root_config, repo_dir)
        if result is not None:
            results.append(result)
    return results
