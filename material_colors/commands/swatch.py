"""Draw one hue's colours as a PNG swatch strip.

One horizontal tile per colour, top to bottom in catalog order (direct
values, then groups). Each tile is labelled with its value name and hex,
in white on dark colours and black on light ones.

Example:
    material-colors swatch indigo ./indigo.png
    material-colors swatch black-and-white ./bw.png --tile 48 --width 320
"""

import os

from PIL import Image, ImageDraw

from material_colors.core.catalog import ColorCatalog
from material_colors.core.index import flatten_catalog
from material_colors.core.palette import hex_to_rgb
from material_colors.core.search import ColorHit, build_tile
from material_colors.core.types import Command, Context, Report

command = Command(
    name='swatch',
    help='Draw a hue as a PNG swatch strip.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('name', help='Hue name, e.g. indigo')
    parser.add_argument('out', help='Output PNG path')
    parser.add_argument('--tile', type=int, default=40, metavar='PX', help='Tile height in pixels (default: 40)')
    parser.add_argument('--width', type=int, default=240, metavar='PX', help='Image width in pixels (default: 240)')


def draw_swatch(records, tile: int = 40, width: int = 240) -> Image.Image:
    """Render records as stacked, labelled tiles."""
    image = Image.new('RGB', (width, max(1, tile * len(records))), (255, 255, 255))
    draw = ImageDraw.Draw(image)
    for i, record in enumerate(records):
        top = i * tile
        draw.rectangle((0, top, width - 1, top + tile - 1), fill=hex_to_rgb(record.hex))
        labels = build_tile(ColorHit(hex=record.hex, record=record))
        ink = (255, 255, 255) if labels.light_text else (0, 0, 0)
        draw.text((8, top + tile // 2 - 6), labels.value_label or '', fill=ink)
        draw.text((width - 64, top + tile // 2 - 6), labels.hex_label, fill=ink)
    return image


@command.run
def run(ctx: Context, report: Report, args) -> None:
    if args.name not in ctx.catalog:
        report.fail(f'Unknown hue: {args.name}')
        return

    records = flatten_catalog(ColorCatalog({args.name: ctx.catalog[args.name]}))
    image = draw_swatch(records, tile=args.tile, width=args.width)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    image.save(args.out)
    report.title = f'Swatch: {args.name}'
    report.add('Files', {'file': args.out, 'width': image.width, 'height': image.height, 'colours': len(records)})
