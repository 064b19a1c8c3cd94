"""Clash report models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class ClashKind(str, Enum):
    """Relationship between a managed executable and an unrelated one.

    Attributes:
        MASKED: The unrelated executable comes first on PATH and wins.
        MASKS: The managed executable comes first and hides the other one.
        UNDETERMINED: A same-named executable exists but the managed host
            is not on PATH, so precedence cannot be decided.
    """

    MASKED = "masked"
    MASKS = "masks"
    UNDETERMINED = "undetermined"


@dataclass(frozen=True, slots=True)
class ClashReport:
    """A single masking clash.

    Attributes:
        name: Managed command name.
        host: Managed location providing the command.
        kind: How the two executables relate.
        other_dir: PATH directory holding the unrelated executable.
    """

    name: str
    host: str
    kind: ClashKind
    other_dir: str

    @property
    def other_path(self) -> str:
        """Full path of the unrelated executable."""
        return str(PurePath(self.other_dir) / self.name)

    def describe(self) -> str:
        """Human-readable one-line description."""
        if self.kind == ClashKind.MASKED:
            return f"{self.name} (masked by {self.other_path})"
        if self.kind == ClashKind.MASKS:
            return f"{self.name} (masks {self.other_path})"
        return f"{self.name} (also exists at {self.other_path})"
