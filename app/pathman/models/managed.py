"""Managed item models.

This module defines the data structures describing what pathman manages:
symlinks housed in the front/back folders and whole directories spliced
into PATH.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Priority(str, Enum):
    """Position of a managed item relative to the rest of PATH.

    Attributes:
        FRONT: Searched before the pre-existing PATH entries.
        BACK: Searched after the pre-existing PATH entries.
    """

    FRONT = "front"
    BACK = "back"

    @property
    def other(self) -> "Priority":
        """The opposite priority."""
        return Priority.BACK if self is Priority.FRONT else Priority.FRONT


def validate_link_name(name: str) -> str:
    """Check that a name can be used as a symlink file name.

    Raises:
        ValueError: If the name is empty, a dot entry, or contains a separator.
    """
    if not name:
        msg = "Link name cannot be empty"
        raise ValueError(msg)
    if name in (".", "..") or os.sep in name or (os.altsep and os.altsep in name):
        msg = f"Invalid link name: {name}"
        raise ValueError(msg)
    return name


@dataclass(frozen=True, slots=True)
class ManagedLink:
    """A symlink inside one of the managed folders.

    Attributes:
        name: Visible command name (the symlink's file name).
        target: Path the symlink points to, as stored in the link.
        priority: Folder hosting the link.
    """

    name: str
    target: str
    priority: Priority

    def __post_init__(self) -> None:
        """Validate link data after initialization."""
        validate_link_name(self.name)


class ManagedDirectory(BaseModel):
    """A whole directory registered in the configuration.

    Attributes:
        path: Absolute filesystem path of the directory.
        priority: Whether the directory goes before or after the rest of PATH.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Annotated[str, Field(description="Absolute directory path")]
    priority: Annotated[Priority, Field(description="front or back")]

    @field_validator("path")
    @classmethod
    def validate_absolute(cls, v: str) -> str:
        """Reject empty and relative paths."""
        if not v:
            msg = "Directory path cannot be empty"
            raise ValueError(msg)
        if not os.path.isabs(v):
            msg = f"Directory path must be absolute: {v}"
            raise ValueError(msg)
        return v


@dataclass(frozen=True, slots=True)
class ManagedExecutable:
    """A command name reachable through a managed location.

    Attributes:
        name: Command name.
        host: Directory that provides the command (a managed folder or a
            managed directory).
    """

    name: str
    host: str
