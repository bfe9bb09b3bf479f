"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from rtop.app import App
from rtop.config import Config

VERSION = "0.1.0"
DESCRIPTION = "A system monitoring tool inspired by top, htop, and btop"


class ViewMode(Enum):
    BASIC = "basic"
    DETAILED = "detailed"
    PROCESS_FOCUS = "process-focus"
    SYSTEM_FOCUS = "system-focus"


class ColorTheme(Enum):
    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Args:
    """Parsed command-line options."""

    interval: int = 1000
    view: ViewMode = ViewMode.BASIC
    theme: ColorTheme = ColorTheme.DEFAULT
    config: str | None = None
    filter: str | None = None


_E = TypeVar("_E", bound=Enum)


def _enum_value(enum_cls: type[_E]) -> Callable[[str], _E]:
    def parse(text: str) -> _E:
        try:
            return enum_cls(text)
        except ValueError:
            choices = ", ".join(member.value for member in enum_cls)
            raise argparse.ArgumentTypeError(
                f"invalid value '{text}' (possible values: {choices})"
            ) from None

    return parse


def _unsigned(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"'{text}' must not be negative")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rtop", description=DESCRIPTION)
    parser.add_argument("-V", "--version", action="version", version=f"rtop {VERSION}")
    parser.add_argument("-i", "--interval", type=_unsigned, default=1000)
    parser.add_argument(
        "-v", "--view", type=_enum_value(ViewMode), default=ViewMode.BASIC,
        metavar="{" + ",".join(m.value for m in ViewMode) + "}",
    )
    parser.add_argument(
        "-t", "--theme", type=_enum_value(ColorTheme), default=ColorTheme.DEFAULT,
        metavar="{" + ",".join(m.value for m in ColorTheme) + "}",
    )
    parser.add_argument("-c", "--config")
    parser.add_argument("-f", "--filter")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse ``argv`` (or the process arguments) into :class:`Args`."""
    ns = _parser().parse_args(argv)
    return Args(
        interval=ns.interval,
        view=ns.view,
        theme=ns.theme,
        config=ns.config,
        filter=ns.filter,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration and run the monitor."""
    args = parse_args(argv)
    config = Config.load(args.config)
    App(config).run()
    return 0