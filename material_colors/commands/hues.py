"""List the hues of the catalog in display order.

Shows each hue's label, its sidebar colour (the hue's selector hint, or
its 500 value; 300 with --dark) and how many colours it holds. Hues that
start a new sidebar group are marked with a leading rule.

Example:
    material-colors hues
    material-colors hues --dark --json
"""

from material_colors.core.catalog import selector_color
from material_colors.core.palette import hue_label
from material_colors.core.types import Command, Context, Report

command = Command(
    name='hues',
    help='List catalog hues with their sidebar colours.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('--dark', action='store_true', help='Use dark-mode sidebar colours')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    dark = getattr(args, 'dark', False)
    report.title = f'{len(ctx.catalog)} hues, {len(ctx.index)} colours'
    for hue_name, entry in ctx.catalog.items():
        count = len(entry.values) + sum(len(g.colors) for g in entry.groups)
        report.add(
            'Hues',
            {
                'name': hue_name,
                'label': hue_label(hue_name),
                'selector': selector_color(entry, dark_mode=dark),
                'count': count,
                'start_group': entry.start_group,
            },
        )
