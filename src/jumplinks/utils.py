"""Utility functions for Jumplinks settings"""

from pathlib import Path


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def join_url(base: str, *parts: str) -> str:
    """Join URL path segments with exactly one slash between them.

    Examples:
        >>> join_url("/site/modules/ProcessJumplinks/", "Assets", "a.css")
        '/site/modules/ProcessJumplinks/Assets/a.css'
    """
    segments = [base.rstrip("/")] + [p.strip("/") for p in parts if p]
    return "/".join(segments)
