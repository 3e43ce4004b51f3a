"""Typed domain errors for the town graph.

Structural misuse of the graph (missing towns, ``None`` arguments,
duplicate roads) is raised as one of these errors. Legitimately missing
data (no road between two towns, unreachable destination) is returned
as ``None``, ``False`` or an empty path instead.

All errors inherit from TownGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TownGraphError(Exception):
    """Base error for the town graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentError(TownGraphError, ValueError):
    """An operation was called with an argument the graph cannot accept."""


@dataclass
class NullInputError(InvalidArgumentError, TypeError):
    """A town, endpoint or name was ``None`` where one is required.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class TownNotFoundError(InvalidArgumentError):
    """A referenced town is not part of the graph.

    Attributes:
        town_name: Name of the town that was not found
    """

    town_name: str = ""


@dataclass
class DuplicateRoadError(InvalidArgumentError):
    """A road already connects the requested pair of towns.

    Attributes:
        source: Name of the first town
        destination: Name of the second town
    """

    source: str = ""
    destination: str = ""
