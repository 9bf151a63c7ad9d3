"""Default snap area tables

Used for any zone without a stored override.
"""

from types import MappingProxyType
from typing import Mapping

from ..core.actions import ActionIdentifier
from .types import CompoundSnapArea, Directional, DisplayOrientation, SnapAreaConfig

_single = SnapAreaConfig.single
_compound = SnapAreaConfig.compound_area

DEFAULT_LANDSCAPE: Mapping[Directional, SnapAreaConfig] = MappingProxyType({
    Directional.TL: _single(ActionIdentifier.TOP_LEFT),
    Directional.T: _single(ActionIdentifier.MAXIMIZE),
    Directional.TR: _single(ActionIdentifier.TOP_RIGHT),
    Directional.L: _compound(CompoundSnapArea.LEFT_TOP_BOTTOM_HALF),
    Directional.R: _compound(CompoundSnapArea.RIGHT_TOP_BOTTOM_HALF),
    Directional.BL: _single(ActionIdentifier.BOTTOM_LEFT),
    Directional.B: _compound(CompoundSnapArea.THIRDS),
    Directional.BR: _single(ActionIdentifier.BOTTOM_RIGHT),
})

DEFAULT_PORTRAIT: Mapping[Directional, SnapAreaConfig] = MappingProxyType({
    Directional.TL: _single(ActionIdentifier.TOP_LEFT),
    Directional.T: _single(ActionIdentifier.MAXIMIZE),
    Directional.TR: _single(ActionIdentifier.TOP_RIGHT),
    Directional.L: _compound(CompoundSnapArea.PORTRAIT_THIRDS_SIDE),
    Directional.R: _compound(CompoundSnapArea.PORTRAIT_THIRDS_SIDE),
    Directional.BL: _single(ActionIdentifier.BOTTOM_LEFT),
    Directional.B: _compound(CompoundSnapArea.HALVES),
    Directional.BR: _single(ActionIdentifier.BOTTOM_RIGHT),
})


def default_table(orientation: DisplayOrientation) -> Mapping[Directional, SnapAreaConfig]:
    if orientation is DisplayOrientation.PORTRAIT:
        return DEFAULT_PORTRAIT
    return DEFAULT_LANDSCAPE
