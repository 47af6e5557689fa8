"""Fatal error types.

Host-scoped failures never show up here: they travel as failure outcomes.
These exceptions stop a run before (or instead of) polling the fleet.
"""
from __future__ import annotations


class FleetHealthError(Exception):
    """Base class for errors that abort a run."""


class ConfigurationError(FleetHealthError, ValueError):
    """A configuration value is out of range."""


class HostListError(FleetHealthError):
    """The host list could not be obtained."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"cannot read host list {source}: {reason}")
        self.source = source
        self.reason = reason


class DispatcherError(FleetHealthError, RuntimeError):
    """A dispatcher was asked to run a second batch."""


class StatusDecodeError(ValueError):
    """A status payload is missing a field or carries a wrongly typed one."""
