"""Uri and CDN path helpers"""
from __future__ import annotations

from typing import Iterable
from urllib import parse

from theme_purge_tools.utils.themes import THEME_MARKER

__all__ = ["join", "gh_path", "build_purge_paths"]


def join(*parts: str, quote: bool = False) -> str:
    """Join uri parts."""
    if not parts:
        return ""

    base = parts[0] if parts[0].endswith("/") else parts[0] + "/"
    return parse.urljoin(
        base,
        "/".join(
            (parse.quote_plus(part.strip("/"), safe="/") if quote else part.strip("/"))
            for part in parts[1:]
        ),
    )


def gh_path(repository: str, theme: str, ref: str | None = None) -> str:
    """jsDelivr GitHub path of a theme stylesheet, optionally pinned to a ref."""
    repo = f"{repository}@{ref}" if ref else repository
    return f"/gh/{repo}/{theme}/{THEME_MARKER}"


def build_purge_paths(repository: str, version: str, themes: Iterable[str]) -> list[str]:
    """
    Paths to purge for each theme, in order:
    the released version, @latest, and the default branch.
    """
    paths = []
    for theme in themes:
        paths.append(gh_path(repository, theme, version))
        paths.append(gh_path(repository, theme, "latest"))
        paths.append(gh_path(repository, theme))
    return paths
