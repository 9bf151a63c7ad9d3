"""Demo: 计算窗口位置并展示 snap area 配置

用法：
    python -m windowcalc.demo --width 1440 --height 900
    python -m windowcalc.demo --action leftHalf --repeat 4
    python -m windowcalc.demo --settings ~/.windowcalc/settings.json --migrate
"""

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .calculation import (
    CalculationParams,
    CalculationSettings,
    LastActionInfo,
    WindowInfo,
    calculate,
    supported_actions,
)
from .core import ActionIdentifier, Rect
from .persistence import JsonSettingsStore, MemorySettingsStore, SettingsStore
from .snapping import DisplayOrientation, SnapAreaModel
from .telemetry import configure_logging, get_logger

logger = get_logger(__name__)


def _format_rect(rect: Rect) -> str:
    return f"({rect.x:g}, {rect.y:g}, {rect.width:g}×{rect.height:g})"


def placement_table(
    frame: Rect,
    actions: list[ActionIdentifier],
    repeat: int,
    settings: CalculationSettings,
) -> Table:
    """对每个 action 连续执行 repeat 次，展示每次结果"""
    table = Table(title=f"Placements in {_format_rect(frame)}")
    table.add_column("Action", style="cyan")
    table.add_column("Press", justify="right")
    table.add_column("Rect")
    table.add_column("Sub action", style="magenta")

    window = WindowInfo(id="demo", rect=Rect(frame.x, frame.y, frame.width / 2, frame.height / 2))

    for action in actions:
        last_action: LastActionInfo | None = None
        for press in range(1, repeat + 1):
            params = CalculationParams(
                window=window,
                visible_frame=frame,
                action=action,
                last_action=last_action,
                settings=settings,
            )
            result = calculate(params)
            table.add_row(
                action.value if press == 1 else "",
                str(press),
                _format_rect(result.rect),
                result.sub_action.value if result.sub_action else "-",
            )
            last_action = result.to_last_action(action, last_action)

    return table


def snap_area_table(model: SnapAreaModel, orientation: DisplayOrientation) -> Table:
    """展示一个方向的生效 snap area 表"""
    overrides = model.overrides(orientation)
    table = Table(title=f"Snap areas ({orientation.value})")
    table.add_column("Zone", style="cyan")
    table.add_column("Config")
    table.add_column("Source", style="dim")

    for zone, entry in model.table(orientation).items():
        if entry.compound is not None:
            description = entry.compound.display_name
        elif entry.action is not None:
            description = entry.action.value
        else:
            description = "[dim]disabled[/dim]"
        source = "override" if zone in overrides else "default"
        table.add_row(zone.name, description, source)

    return table


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="windowcalc demo")
    parser.add_argument("--width", type=float, default=1440.0, help="visible frame width")
    parser.add_argument("--height", type=float, default=900.0, help="visible frame height")
    parser.add_argument(
        "--action",
        action="append",
        choices=[action.value for action in supported_actions()],
        help="action to calculate (repeatable, default: all supported)",
    )
    parser.add_argument("--repeat", type=int, default=1, help="presses per action")
    parser.add_argument("--gap", type=float, default=0.0, help="gap between windows")
    parser.add_argument("--no-cycling", action="store_true", help="disable size cycling")
    parser.add_argument("--settings", type=Path, help="settings file (default: in-memory)")
    parser.add_argument("--migrate", action="store_true", help="run legacy snap area migration")
    parser.add_argument("--log-level", default=None, help="log level (default: config)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    console = Console()

    frame = Rect(0.0, 0.0, args.width, args.height)
    actions = (
        [ActionIdentifier(value) for value in args.action]
        if args.action
        else supported_actions()
    )
    settings = CalculationSettings(
        cycling_enabled=not args.no_cycling,
        gap_size=args.gap,
    )
    console.print(placement_table(frame, actions, max(args.repeat, 1), settings))

    store: SettingsStore = JsonSettingsStore(args.settings) if args.settings else MemorySettingsStore()
    model = SnapAreaModel(store)
    if args.migrate and model.migrate():
        logger.info("[Demo] Legacy snap area settings migrated")

    for orientation in DisplayOrientation:
        console.print(snap_area_table(model, orientation))


if __name__ == "__main__":
    main()
