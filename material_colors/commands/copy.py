"""List the copy options the context menu offers for a colour.

Hex formats come first: #rrggbb, rrggbb, rgb(r, g, b) and, for a
translucent colour, rgba(r, g, b, .AA). Then every configured copy format
rendered for the colour, in configuration order ('$HUE $VALUE' with the
Xx transform when none are configured).

Catalog colours get one section per matching record. Other colours get a
single section with empty names.

Example:
    material-colors copy '#03a9f4'
    material-colors --config ~/.materialcolorsapp.json copy 'rgba(3, 169, 244, 0.3)'
"""

from material_colors.core.search import ColorHit, SearchStatus, copy_options, search
from material_colors.core.types import Command, Context, Report

command = Command(
    name='copy',
    help='List the copy formats offered for a colour.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('text', help='Colour code or name')


def _section_name(hit: ColorHit) -> str:
    record = hit.record
    if record is None:
        return hit.hex
    parts = [record.hue_name]
    if record.group_name:
        parts.append(record.group_name)
    parts.append(record.value_name)
    return ' / '.join(parts)


@command.run
def run(ctx: Context, report: Report, args) -> None:
    result = search(ctx.index, args.text)
    if result.status in (SearchStatus.EMPTY, SearchStatus.UNKNOWN):
        report.fail(f'Unknown color: {args.text}')
        return

    report.title = f'Copy: {args.text}'
    for hit in result.matches:
        options = copy_options(hit, ctx.config.copy_formats)
        section = _section_name(hit)
        for text in options.hex_formats:
            report.add(section, {'kind': 'hex', 'text': text})
        for text in options.value_formats:
            report.add(section, {'kind': 'value', 'text': text})
