"""Shared types for material-colors: catalog values, records, templates, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from material_colors.core.catalog import ColorCatalog
    from material_colors.core.config import AppConfig
    from material_colors.core.index import CatalogIndex


@dataclass(frozen=True)
class ColorValue:
    """A leaf colour in the catalog. Not tied to its hue until flattening."""

    hex: str  # '#rrggbb', lower case
    name: str | None = None  # optional display name


@dataclass(frozen=True)
class ColorGroup:
    """An ordered, optionally titled list of colours inside a hue."""

    title: str | None = None
    colors: tuple[ColorValue, ...] = ()


@dataclass(frozen=True)
class HueEntry:
    """One hue of the catalog: direct values plus groups.

    The selector hints and start_group flag are only used for display
    (sidebar icon colour and separator), never for matching.
    """

    values: Mapping[str, ColorValue] = field(default_factory=lambda: MappingProxyType({}))
    groups: tuple[ColorGroup, ...] = ()
    selector_light: str | None = None
    selector_dark: str | None = None
    start_group: bool = False


@dataclass(frozen=True)
class SearchableRecord:
    """Flattened unit the index operates on. One per leaf ColorValue."""

    hue_name: str
    value_name: str
    hex: str
    group_name: str | None = None
    name: str | None = None  # declared display name, if any


@dataclass(frozen=True)
class ColorQuery:
    """An ad-hoc colour, not a catalog member. Alpha is display-only."""

    hex: str
    alpha: float = 1.0


@dataclass(frozen=True)
class FormatTemplate:
    """A copy format: pattern with $HUE/$VALUE/$ALPHA plus a transform spec."""

    pattern: str
    transform: str | None = None


@dataclass(frozen=True)
class FormatData:
    """Names and alpha fed into a FormatTemplate."""

    hue_name: str | None = ''
    value_name: str | None = ''
    group_name: str | None = None
    alpha: float | None = None

    @classmethod
    def from_record(cls, record: SearchableRecord, alpha: float | None = None) -> FormatData:
        return cls(
            hue_name=record.hue_name,
            value_name=record.value_name,
            group_name=record.group_name,
            alpha=alpha,
        )


@dataclass
class Context:
    """Everything a command needs, built once at startup and passed explicitly."""

    catalog: ColorCatalog
    index: CatalogIndex
    config: AppConfig


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='search', help='Find a colour in the catalog')

        @command.arguments
        def arguments(parser):
            parser.add_argument('text')

        @command.run
        def run(ctx, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function adding this command's CLI arguments."""
        self._arguments_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, ctx: Context, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(ctx, report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str = ''
    title: str = ''
    sections: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    headings: dict[str, str] = field(default_factory=dict)
    notes: list[str] = field(default_factory=list)
    failed: bool = False

    def add(self, section: str, data: dict[str, Any], heading: str | None = None) -> None:
        """Append one entry to a section, creating it on first use.

        The heading defaults to the section key; an empty heading is not printed.
        """
        if section not in self.sections:
            self.sections[section] = []
            self.headings[section] = section if heading is None else heading
        self.sections[section].append(data)

    def heading(self, section: str) -> str:
        return self.headings.get(section, section)

    def note(self, text: str) -> None:
        self.notes.append(text)

    def fail(self, text: str | None = None) -> None:
        self.failed = True
        if text:
            self.notes.append(text)
