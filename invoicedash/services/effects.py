"""Side effects a mutation asks its caller to perform once it has returned."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Revalidate:
    """Mark the cached output of ``path`` stale."""

    path: str


@dataclass(frozen=True)
class Redirect:
    """Send the browser to ``path``."""

    path: str


Effect = Revalidate | Redirect
