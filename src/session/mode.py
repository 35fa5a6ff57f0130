"""Processing modes selectable during a session."""

from enum import Enum


class Mode(Enum):
    """Active processing mode."""
    IDLE = 0
    STANDARD = 1
    THREADED = 2

    @classmethod
    def from_name(cls, name: str) -> "Mode":
        """Look up a mode by its case-insensitive name.

        Args:
            name (str): Mode name such as "standard".
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(mode.name.lower() for mode in cls)
            raise ValueError(f"unknown mode {name!r}, expected one of: {choices}") from None
