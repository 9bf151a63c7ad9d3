"""Snap area types

Screen zones (Directional), compound snap areas, the per-zone config value
and the legacy ignored-zones bitmask.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from typing import Any

from ..core.actions import ActionIdentifier


class Directional(IntEnum):
    """A drag zone on the screen. Values are the persisted keys."""

    TL = 1
    T = 2
    TR = 3
    L = 4
    R = 5
    BL = 6
    B = 7
    BR = 8
    C = 9

    @classmethod
    def snap_cases(cls) -> list["Directional"]:
        """Zones usable for snapping (center excluded)."""
        return [d for d in cls if d is not cls.C]


class DisplayOrientation(Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class CompoundSnapArea(IntEnum):
    """Zone behaviours that pick a placement from the cursor position along an edge.

    Negative ids keep them apart from plain actions in persisted data.
    """

    LEFT_TOP_BOTTOM_HALF = -2
    RIGHT_TOP_BOTTOM_HALF = -3
    THIRDS = -4
    PORTRAIT_THIRDS_SIDE = -5
    HALVES = -6
    TOP_SIXTHS = -7
    BOTTOM_SIXTHS = -8
    FOURTHS = -9
    PORTRAIT_TOP_BOTTOM_HALVES = -10

    @property
    def display_name(self) -> str:
        return _COMPOUND_NAMES[self]

    @property
    def compatible_directionals(self) -> tuple[Directional, ...]:
        """Zones this compound area may be assigned to."""
        return _COMPOUND_DIRECTIONALS[self]

    @property
    def compatible_orientations(self) -> tuple[DisplayOrientation, ...]:
        return _COMPOUND_ORIENTATIONS[self]

    def is_compatible(self, orientation: DisplayOrientation, zone: Directional) -> bool:
        return (
            orientation in self.compatible_orientations
            and zone in self.compatible_directionals
        )


_COMPOUND_NAMES = {
    CompoundSnapArea.LEFT_TOP_BOTTOM_HALF: "Left half, top/bottom half near corners",
    CompoundSnapArea.RIGHT_TOP_BOTTOM_HALF: "Right half, top/bottom half near corners",
    CompoundSnapArea.THIRDS: "Thirds, drag toward center for two thirds",
    CompoundSnapArea.PORTRAIT_THIRDS_SIDE: "Thirds, top/bottom half near corners",
    CompoundSnapArea.HALVES: "Left or right half",
    CompoundSnapArea.TOP_SIXTHS: "Top sixths from corners; maximize",
    CompoundSnapArea.BOTTOM_SIXTHS: "Bottom sixths from corners; thirds",
    CompoundSnapArea.FOURTHS: "Fourths columns",
    CompoundSnapArea.PORTRAIT_TOP_BOTTOM_HALVES: "Top/bottom halves",
}

_COMPOUND_DIRECTIONALS = {
    CompoundSnapArea.LEFT_TOP_BOTTOM_HALF: (Directional.L,),
    CompoundSnapArea.RIGHT_TOP_BOTTOM_HALF: (Directional.R,),
    CompoundSnapArea.THIRDS: (Directional.T, Directional.B),
    CompoundSnapArea.PORTRAIT_THIRDS_SIDE: (Directional.L, Directional.R),
    CompoundSnapArea.HALVES: (Directional.T, Directional.B),
    CompoundSnapArea.TOP_SIXTHS: (Directional.T,),
    CompoundSnapArea.BOTTOM_SIXTHS: (Directional.B,),
    CompoundSnapArea.FOURTHS: (Directional.T, Directional.B),
    CompoundSnapArea.PORTRAIT_TOP_BOTTOM_HALVES: (Directional.L, Directional.R),
}

_BOTH = (DisplayOrientation.LANDSCAPE, DisplayOrientation.PORTRAIT)
_LANDSCAPE = (DisplayOrientation.LANDSCAPE,)
_PORTRAIT = (DisplayOrientation.PORTRAIT,)

_COMPOUND_ORIENTATIONS = {
    CompoundSnapArea.LEFT_TOP_BOTTOM_HALF: _BOTH,
    CompoundSnapArea.RIGHT_TOP_BOTTOM_HALF: _BOTH,
    CompoundSnapArea.THIRDS: _LANDSCAPE,
    CompoundSnapArea.PORTRAIT_THIRDS_SIDE: _PORTRAIT,
    CompoundSnapArea.HALVES: _BOTH,
    CompoundSnapArea.TOP_SIXTHS: _LANDSCAPE,
    CompoundSnapArea.BOTTOM_SIXTHS: _LANDSCAPE,
    CompoundSnapArea.FOURTHS: _LANDSCAPE,
    CompoundSnapArea.PORTRAIT_TOP_BOTTOM_HALVES: _PORTRAIT,
}


class SnapAreaKind(Enum):
    UNCONFIGURED = "unconfigured"
    SINGLE = "single"
    COMPOUND = "compound"


@dataclass(frozen=True)
class SnapAreaConfig:
    """What a zone does when a window is dropped on it.

    At most one of ``action`` / ``compound`` is set; neither means the zone
    is inert. Build through ``unconfigured()``, ``single()`` or
    ``compound_area()`` rather than the constructor.
    """

    action: ActionIdentifier | None = None
    compound: CompoundSnapArea | None = None

    def __post_init__(self):
        if self.action is not None and self.compound is not None:
            raise ValueError(
                f"SnapAreaConfig cannot have both action={self.action.value} "
                f"and compound={self.compound.name}"
            )

    @classmethod
    def unconfigured(cls) -> "SnapAreaConfig":
        return cls()

    @classmethod
    def single(cls, action: ActionIdentifier) -> "SnapAreaConfig":
        return cls(action=action)

    @classmethod
    def compound_area(cls, area: CompoundSnapArea) -> "SnapAreaConfig":
        return cls(compound=area)

    @property
    def kind(self) -> SnapAreaKind:
        if self.compound is not None:
            return SnapAreaKind.COMPOUND
        if self.action is not None:
            return SnapAreaKind.SINGLE
        return SnapAreaKind.UNCONFIGURED

    @property
    def is_configured(self) -> bool:
        return self.kind is not SnapAreaKind.UNCONFIGURED

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.action is not None:
            data["action"] = self.action.value
        if self.compound is not None:
            data["compound"] = int(self.compound)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SnapAreaConfig":
        """Inverse of ``to_dict``.

        Raises:
            ValueError: unknown action or compound id, or both present
        """
        action = data.get("action")
        compound = data.get("compound")
        return cls(
            action=ActionIdentifier(action) if action is not None else None,
            compound=CompoundSnapArea(compound) if compound is not None else None,
        )

    def __str__(self) -> str:
        if self.compound is not None:
            return f"compound:{self.compound.name}"
        if self.action is not None:
            return f"single:{self.action.value}"
        return "unconfigured"


class SnapAreaOption(IntFlag):
    """Legacy ignored-zones bitmask, read only by migration."""

    NONE = 0
    TOP = 1 << 0
    BOTTOM = 1 << 1
    LEFT = 1 << 2
    RIGHT = 1 << 3
    TOP_LEFT = 1 << 4
    TOP_RIGHT = 1 << 5
    BOTTOM_LEFT = 1 << 6
    BOTTOM_RIGHT = 1 << 7
    TOP_LEFT_SHORT = 1 << 8
    TOP_RIGHT_SHORT = 1 << 9
    BOTTOM_LEFT_SHORT = 1 << 10
    BOTTOM_RIGHT_SHORT = 1 << 11
    ALL = (1 << 12) - 1


DIRECTIONAL_OPTIONS: dict[Directional, SnapAreaOption] = {
    Directional.TL: SnapAreaOption.TOP_LEFT,
    Directional.T: SnapAreaOption.TOP,
    Directional.TR: SnapAreaOption.TOP_RIGHT,
    Directional.L: SnapAreaOption.LEFT,
    Directional.R: SnapAreaOption.RIGHT,
    Directional.BL: SnapAreaOption.BOTTOM_LEFT,
    Directional.B: SnapAreaOption.BOTTOM,
    Directional.BR: SnapAreaOption.BOTTOM_RIGHT,
}
