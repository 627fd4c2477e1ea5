"""Show every colour of one hue: direct values first, then each group.

Example:
    material-colors hue light-blue
    material-colors hue black-and-white --json
"""

from material_colors.commands._tiles import tile_entry
from material_colors.core.catalog import ColorCatalog
from material_colors.core.index import flatten_catalog
from material_colors.core.palette import hue_label
from material_colors.core.search import ColorHit
from material_colors.core.types import Command, Context, Report

command = Command(
    name='hue',
    help='Show all colours of a hue.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('name', help='Hue name, e.g. light-blue')
    parser.add_argument('--hide-hash', action='store_true', help='Show hex codes without the leading #')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    if args.name not in ctx.catalog:
        report.fail(f'Unknown hue: {args.name}. Available: {", ".join(ctx.catalog)}')
        return

    entry = ctx.catalog[args.name]
    formats = ctx.config.effective_copy_formats
    hide_hash = getattr(args, 'hide_hash', False)
    report.title = hue_label(args.name)

    records = flatten_catalog(ColorCatalog({args.name: entry}))
    # Keyed by position so equal or untitled group titles never share a section.
    sections = [('values', 'Values', len(entry.values))]
    sections += [(f'group-{i + 1}', group.title or '', len(group.colors)) for i, group in enumerate(entry.groups)]

    pos = 0
    for section, heading, count in sections:
        for record in records[pos : pos + count]:
            hit = ColorHit(hex=record.hex, record=record)
            entry_data = tile_entry(hit, large=False, hide_hash=hide_hash, copy_formats=formats)
            report.add(section, entry_data, heading=heading)
        pos += count
