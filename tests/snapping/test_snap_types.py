"""Snap area 类型测试"""

import pytest

from windowcalc.core import ActionIdentifier
from windowcalc.snapping import (
    DEFAULT_LANDSCAPE,
    DEFAULT_PORTRAIT,
    DIRECTIONAL_OPTIONS,
    CompoundSnapArea,
    Directional,
    DisplayOrientation,
    SnapAreaConfig,
    SnapAreaKind,
    SnapAreaOption,
    default_table,
)


class TestSnapAreaConfig:
    """SnapAreaConfig 三种形态测试"""

    def test_unconfigured(self):
        cfg = SnapAreaConfig.unconfigured()
        assert cfg.kind is SnapAreaKind.UNCONFIGURED
        assert not cfg.is_configured
        assert cfg.to_dict() == {}

    def test_single(self):
        cfg = SnapAreaConfig.single(ActionIdentifier.LEFT_HALF)
        assert cfg.kind is SnapAreaKind.SINGLE
        assert cfg.is_configured
        assert cfg.to_dict() == {"action": "leftHalf"}

    def test_compound(self):
        cfg = SnapAreaConfig.compound_area(CompoundSnapArea.THIRDS)
        assert cfg.kind is SnapAreaKind.COMPOUND
        assert cfg.to_dict() == {"compound": -4}

    def test_both_set_rejected(self):
        """action 与 compound 不能同时设置"""
        with pytest.raises(ValueError):
            SnapAreaConfig(action=ActionIdentifier.MAXIMIZE, compound=CompoundSnapArea.HALVES)

    def test_from_dict(self):
        assert SnapAreaConfig.from_dict({"compound": -7}) == SnapAreaConfig.compound_area(
            CompoundSnapArea.TOP_SIXTHS
        )
        assert SnapAreaConfig.from_dict({"action": "maximize"}) == SnapAreaConfig.single(
            ActionIdentifier.MAXIMIZE
        )
        assert SnapAreaConfig.from_dict({}) == SnapAreaConfig.unconfigured()

    def test_from_dict_unknown_values(self):
        with pytest.raises(ValueError):
            SnapAreaConfig.from_dict({"action": "teleport"})
        with pytest.raises(ValueError):
            SnapAreaConfig.from_dict({"compound": -1})

    def test_str(self):
        assert str(SnapAreaConfig.single(ActionIdentifier.TOP_LEFT)) == "single:topLeft"
        assert str(SnapAreaConfig.unconfigured()) == "unconfigured"


class TestCompoundSnapArea:
    """Compound snap area 元数据测试"""

    def test_persisted_ids(self):
        assert [int(area) for area in CompoundSnapArea] == list(range(-2, -11, -1))

    def test_display_names(self):
        assert CompoundSnapArea.HALVES.display_name == "Left or right half"
        assert CompoundSnapArea.FOURTHS.display_name == "Fourths columns"

    def test_compatibility(self):
        assert CompoundSnapArea.LEFT_TOP_BOTTOM_HALF.compatible_directionals == (Directional.L,)
        assert CompoundSnapArea.THIRDS.is_compatible(DisplayOrientation.LANDSCAPE, Directional.B)
        assert not CompoundSnapArea.THIRDS.is_compatible(DisplayOrientation.PORTRAIT, Directional.B)
        assert CompoundSnapArea.PORTRAIT_THIRDS_SIDE.is_compatible(
            DisplayOrientation.PORTRAIT, Directional.R
        )

    @pytest.mark.parametrize("orientation", list(DisplayOrientation))
    def test_defaults_are_compatible(self, orientation):
        """默认表中的 compound 都与所在区域兼容"""
        for zone, cfg in default_table(orientation).items():
            if cfg.compound is not None:
                assert cfg.compound.is_compatible(orientation, zone)


class TestDirectional:
    def test_snap_cases_exclude_center(self):
        cases = Directional.snap_cases()
        assert len(cases) == 8
        assert Directional.C not in cases

    def test_persisted_values(self):
        assert Directional.TL == 1
        assert Directional.C == 9


class TestDefaults:
    """默认表测试"""

    def test_landscape(self):
        assert DEFAULT_LANDSCAPE[Directional.T] == SnapAreaConfig.single(ActionIdentifier.MAXIMIZE)
        assert DEFAULT_LANDSCAPE[Directional.L] == SnapAreaConfig.compound_area(
            CompoundSnapArea.LEFT_TOP_BOTTOM_HALF
        )
        assert DEFAULT_LANDSCAPE[Directional.B] == SnapAreaConfig.compound_area(
            CompoundSnapArea.THIRDS
        )
        assert DEFAULT_LANDSCAPE[Directional.BR] == SnapAreaConfig.single(
            ActionIdentifier.BOTTOM_RIGHT
        )

    def test_portrait(self):
        assert DEFAULT_PORTRAIT[Directional.L] == DEFAULT_PORTRAIT[Directional.R]
        assert DEFAULT_PORTRAIT[Directional.R] == SnapAreaConfig.compound_area(
            CompoundSnapArea.PORTRAIT_THIRDS_SIDE
        )
        assert DEFAULT_PORTRAIT[Directional.B] == SnapAreaConfig.compound_area(
            CompoundSnapArea.HALVES
        )

    def test_tables_cover_every_snap_zone(self):
        for table in (DEFAULT_LANDSCAPE, DEFAULT_PORTRAIT):
            assert set(table) == set(Directional.snap_cases())

    def test_defaults_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_LANDSCAPE[Directional.T] = SnapAreaConfig.unconfigured()


class TestSnapAreaOption:
    """旧版 bitmask 测试"""

    def test_bit_positions(self):
        assert SnapAreaOption.TOP == 1
        assert SnapAreaOption.BOTTOM_RIGHT == 1 << 7
        assert SnapAreaOption.TOP_LEFT_SHORT == 1 << 8
        assert SnapAreaOption.BOTTOM_RIGHT_SHORT == 1 << 11
        assert SnapAreaOption.ALL == 0xFFF

    def test_directional_mapping(self):
        assert DIRECTIONAL_OPTIONS[Directional.TL] is SnapAreaOption.TOP_LEFT
        assert DIRECTIONAL_OPTIONS[Directional.B] is SnapAreaOption.BOTTOM
        assert set(DIRECTIONAL_OPTIONS) == set(Directional.snap_cases())
