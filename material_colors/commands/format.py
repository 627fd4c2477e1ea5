"""Render an ad-hoc copy format for a colour.

The pattern may use $HUE, $VALUE and $ALPHA. The optional transform is up
to three characters: x (lower), X (upper) or Xx (sentence case), optionally
preceded by a replacer for spaces and hyphens; 'd' deletes them.
An invalid transform leaves the names as they are.

Every catalog record with the colour's hex is rendered. A colour outside
the catalog renders with empty names.

Example:
    material-colors format '#03a9f4' --pattern '$HUE $VALUE' --transform Xx
    material-colors format '#ff80ab' --pattern 'R.color.$HUE_$VALUE' --transform _x
    material-colors format 'rgba(244, 67, 54, .5)' --pattern '$HUE-$VALUE/$ALPHA' --transform dX
"""

from material_colors.core.formatter import parse_transform, render
from material_colors.core.search import SearchStatus, search
from material_colors.core.types import Command, Context, FormatTemplate, Report

command = Command(
    name='format',
    help='Render a custom $HUE/$VALUE/$ALPHA pattern for a colour.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('text', help='Colour code or name')
    parser.add_argument('--pattern', default='$HUE $VALUE', help="Pattern (default: '$HUE $VALUE')")
    parser.add_argument('--transform', default=None, help='Transform spec, e.g. Xx, _X, dx')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    result = search(ctx.index, args.text)
    if result.status in (SearchStatus.EMPTY, SearchStatus.UNKNOWN):
        report.fail(f'Unknown color: {args.text}')
        return

    template = FormatTemplate(pattern=args.pattern, transform=args.transform)
    if args.transform and parse_transform(args.transform).is_identity:
        report.note(f'Ignoring invalid transform {args.transform!r}')

    report.title = f'Format: {args.pattern}'
    for hit in result.matches:
        report.add('Rendered', {'hex': hit.hex, 'text': render(template, hit.format_data)})
