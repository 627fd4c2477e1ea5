"""material-colors: Look up Material Design colours and render copy formats.

Usage: material-colors [--config PATH] [--catalog PATH] <command> [options]

Commands are auto-discovered from material_colors/commands/.
Each command module's docstring is its documentation.
Run `material-colors help <command>` for full module docs.

Configuration:
  Copy formats and extra colours are read from ~/.materialcolorsapp.json,
  or from the file named by MATERIAL_COLORS_CONFIG, or from --config.
  A missing or broken config file falls back to defaults.
"""

import argparse
import importlib
import logging
import sys

from material_colors import registry
from material_colors.core.catalog import CatalogError, load_bundled_catalog, load_catalog_file
from material_colors.core.config import load_config
from material_colors.core.index import build_index
from material_colors.core.report import format_json, format_text
from material_colors.core.types import Context, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'material_colors.commands.{name}')


def _short_help(name: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  material-colors search '#f44336'\n"
        "  material-colors search 'rgba(33, 150, 243, 0.5)' --json\n"
        '  material-colors hues --dark\n'
        '  material-colors hue light-blue\n'
        "  material-colors copy '#03a9f4'\n"
        "  material-colors format '#ff80ab' --pattern '$HUE_$VALUE' --transform _x\n"
        '  material-colors swatch indigo ./indigo.png\n'
        '  material-colors help search\n'
        '\n'
        'Transforms (copy formats):\n'
        '  x / X / Xx       lower / upper / sentence case\n'
        '  _X, -x, dXx      leading replacer for spaces and hyphens, d deletes them\n'
    )
    parser = argparse.ArgumentParser(
        prog='material-colors',
        description='Look up Material Design colours and render copy formats.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        default=None,
        help='Config file (default: $MATERIAL_COLORS_CONFIG or ~/.materialcolorsapp.json)',
    )
    parser.add_argument(
        '--catalog',
        metavar='PATH',
        default=None,
        help='Catalog JSON to use instead of the bundled Material palette',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name))
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        cmd.add_arguments(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: material-colors help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def build_context(config_path: str | None = None, catalog_path: str | None = None) -> Context:
    """Load config and catalog, merge extra colours and build the index once."""
    config = load_config(config_path)
    catalog = load_catalog_file(catalog_path) if catalog_path else load_bundled_catalog()
    catalog = catalog.with_extra(config.extra_colors)
    return Context(catalog=catalog, index=build_index(catalog), config=config)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='material-colors: %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    try:
        ctx = build_context(args.config, args.catalog)
    except (OSError, CatalogError) as e:
        print(f'Error: cannot load catalog: {e}', file=sys.stderr)
        sys.exit(1)

    report = Report(command=args.command)
    cmd = registry.get(args.command)
    cmd.execute(ctx, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    if report.failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
