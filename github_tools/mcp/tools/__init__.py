"""Tool registrations grouped by domain."""

from . import github, scaffold, utilities  # noqa: F401

__all__ = ["github", "scaffold", "utilities"]
