from __future__ import annotations

import importlib.metadata


def get_version_string() -> str:
    """Return the installed package version, or 'unknown' from a bare checkout."""
    try:
        return importlib.metadata.version("nunitius")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"
