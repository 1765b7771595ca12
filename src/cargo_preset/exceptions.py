"""Custom exception hierarchy for cargo-preset.

Every failure that reaches the CLI error boundary must be a
:class:`CargoPresetError`.  Raw :class:`OSError` instances raised by the
filesystem are caught at the service boundary and re-raised as
:class:`PresetIOError` with the original error chained.

Hierarchy
---------
CargoPresetError
├── InvalidCommandError
├── EnvironmentCheckError
│   ├── HomeDirectoryNotFoundError
│   └── ConfigDirectoryNotFoundError
├── PresetExistsError
├── PresetNotFoundError
├── PresetIOError
└── MissingDependencyError
"""

from __future__ import annotations


class CargoPresetError(Exception):
    """Base exception for all cargo-preset errors.

    Carries a human-readable message and an optional hint which the CLI
    renders below the message.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command values --------------------------------------------------------

class InvalidCommandError(CargoPresetError):
    """Raised when a command is constructed with invalid arguments."""


# --- Environment -----------------------------------------------------------

class EnvironmentCheckError(CargoPresetError):
    """Raised when a required environment precondition is not met."""


class HomeDirectoryNotFoundError(EnvironmentCheckError):
    """Raised when ``HOME`` is unset or empty."""


class ConfigDirectoryNotFoundError(EnvironmentCheckError):
    """Raised when ``$HOME/.config`` does not exist."""


# --- Registry --------------------------------------------------------------

class PresetExistsError(CargoPresetError):
    """Raised when adding a preset whose name is already taken."""


class PresetNotFoundError(CargoPresetError):
    """Raised when the named preset is not in the store."""


# --- Filesystem ------------------------------------------------------------

class PresetIOError(CargoPresetError):
    """Raised when a read, copy, create or delete on the filesystem fails."""


# --- Optional dependencies -------------------------------------------------

class MissingDependencyError(CargoPresetError):
    """Raised when an optional UI dependency is required but not installed."""
