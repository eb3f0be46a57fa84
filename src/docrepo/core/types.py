"""Shared type aliases used across docrepo."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

# Config value types
ConfigDict = dict[str, Any]

# Path types
PathLike = str | Path

# Produces a fresh document id on each call
IdFactory = Callable[[], str]
