"""Version reporting for ``modedit --version``."""

from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional

from . import __version__


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def get_version() -> str:
    """Installed distribution version, or the package version when not installed."""
    try:
        return importlib.metadata.version("modedit")
    except importlib.metadata.PackageNotFoundError:
        return __version__


def get_version_string() -> str:
    version = get_version()
    # Running from a checkout: add the short commit hash
    commit = _run_git(["rev-parse", "--short=7", "HEAD"], cwd=Path(__file__).resolve().parent)
    if commit:
        return f"modedit {version} ({commit})"
    return f"modedit {version}"
