# ptgen.py
"""
PTGen = Penrose-Tiling-Generator

Writes a grid of boxes of a Penrose rhombus tiling as SVG (display), SVG
lines (CNC engraving) or PNG.
"""
import argparse
import logging
import sys
from ptgen_tools import TilingGenerator, SvgOutput, SvgLineOutput, PngOutput
from ptgen_tools.Config import DEFAULT_CONFIG, OUTPUT_TYPES, initialize_config

logger = logging.getLogger('PTGen')

# argparse destination -> config key
OVERRIDES = {
    'seed': 'seed',
    'min_x': 'min_x',
    'min_y': 'min_y',
    'width': 'width',
    'height': 'height',
    'count_x': 'count_x',
    'count_y': 'count_y',
    'type': 'type',
    'grid_spacing': 'grid_spacing',
    'show_grid': 'show_grid',
    'partition': 'partition',
    'scale': 'scale',
}


def build_parser():
    parser = argparse.ArgumentParser(prog='ptgen', description="Penrose Tiling Generator")
    parser.add_argument('--config', help='INI file with default settings (created if missing)')
    parser.add_argument('-s', '--seed', type=int, help='The random seed used to generate the tiling')
    parser.add_argument('-x', '--minX', dest='min_x', type=float,
                        help='The minimum x value of the tiling to generate')
    parser.add_argument('-y', '--minY', dest='min_y', type=float,
                        help='The minimum y value of the tiling to generate')
    parser.add_argument('-w', '--width', type=float, help='The width of each grid square')
    parser.add_argument('--height', type=float, help='The height of each grid square')
    parser.add_argument('-cx', '--countX', dest='count_x', type=int,
                        help='The number of grids to generate in the x axis')
    parser.add_argument('-cy', '--countY', dest='count_y', type=int,
                        help='The number of grids to generate in the y axis')
    parser.add_argument('-t', '--type', type=str.lower, choices=OUTPUT_TYPES,
                        help='Which type of output to generate')
    parser.add_argument('--grid-spacing', dest='grid_spacing', type=float,
                        help='How much space to leave between each grid box')
    parser.add_argument('--show-grid', dest='show_grid', action='store_true', default=None,
                        help='Draw a border around each grid box. Rhombi on the edge of a box '
                             'may pass beyond it')
    parser.add_argument('--partition', action='store_true', default=None,
                        help='Draw each rhombus only in the box holding most of it')
    parser.add_argument('--scale', type=int, help='Pixels per unit for png output')
    parser.add_argument('-o', '--output', help='Output file (svg defaults to stdout)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def load_settings(args):
    if args.config:
        settings = initialize_config(args.config)
    else:
        settings = read_defaults()
    for dest, key in OVERRIDES.items():
        value = getattr(args, dest)
        if value is not None:
            settings[key] = value
    return settings


def read_defaults():
    return {key: list(value) if isinstance(value, list) else value
            for key, value in DEFAULT_CONFIG.items()}


def create_output(settings, stream):
    output_type = settings['type']
    if output_type == 'svg':
        return SvgOutput(stream, grid_spacing=settings['grid_spacing'],
                         show_grid=settings['show_grid'])
    if output_type == 'svgline':
        return SvgLineOutput(stream, grid_spacing=settings['grid_spacing'],
                             show_grid=settings['show_grid'])
    raise ValueError(f"Unknown output type {output_type!r}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, stream=sys.stderr)

    try:
        settings = load_settings(args)
        generator = TilingGenerator(
            seed=settings['seed'],
            min_x=settings['min_x'],
            min_y=settings['min_y'],
            width=settings['width'],
            height=settings['height'],
            count_x=settings['count_x'],
            count_y=settings['count_y'],
            partition=settings['partition'],
            offsets=settings['gamma'] or None,
        )
        logger.info(f"Generating {settings['type']} tiling with seed {settings['seed']}")

        if settings['type'] == 'png':
            if not args.output:
                parser.error('png output needs --output')
            output = PngOutput(args.output, scale=settings['scale'],
                               color1=settings['color1'], color2=settings['color2'],
                               grid_spacing=settings['grid_spacing'],
                               show_grid=settings['show_grid'])
            generator.visit_rhombii(output)
        elif args.output:
            with open(args.output, 'w') as stream:
                generator.visit_rhombii(create_output(settings, stream))
        else:
            generator.visit_rhombii(create_output(settings, sys.stdout))

    except Exception as e:
        logger.error(f"An error occurred: {e}")
        raise

    return 0


if __name__ == '__main__':
    sys.exit(main())
