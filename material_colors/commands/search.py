"""Look up a colour in the catalog: exact matches, or the closest colours.

Accepts any colour the parser understands: #rgb, #rrggbb, #rrggbbaa,
rrggbb, rgb(), rgba() with a 0-1 alpha, hsl() and CSS colour names.

If the colour is in the catalog, every record with that hex is listed
(a hex can appear under several hues or groups). A translucent query
carries its alpha onto the results. Otherwise the colour itself is shown
followed by the three nearest catalog colours (straight RGB distance).

Each result shows what a click on its name would copy, using the first
configured copy format.

Exit status is 1 when the input is not a colour.

Example:
    material-colors search '#F44336'
    material-colors search 'rgba(33, 150, 243, 0.5)'
    material-colors search tomato --json
"""

from material_colors.commands._tiles import tile_entry
from material_colors.core.search import HELP_TEXT, SearchStatus, search
from material_colors.core.types import Command, Context, Report

command = Command(
    name='search',
    help='Find a colour in the catalog, or the closest catalog colours.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('text', nargs='?', default='', help='Colour code or name')
    parser.add_argument('--hide-hash', action='store_true', help='Show hex codes without the leading #')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    result = search(ctx.index, args.text)
    formats = ctx.config.effective_copy_formats
    hide_hash = getattr(args, 'hide_hash', False)

    if result.status is SearchStatus.EMPTY:
        report.note(HELP_TEXT)
        return
    if result.status is SearchStatus.UNKNOWN:
        report.fail(f'Unknown color: {args.text}')
        return

    report.title = f'Search: {args.text}'
    for hit in result.matches:
        report.add('Matches', tile_entry(hit, hide_hash=hide_hash, copy_formats=formats))
    for hit in result.similar:
        report.add('Similar colors', tile_entry(hit, hide_hash=hide_hash, copy_formats=formats))
