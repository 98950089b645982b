# ptgen_tools/Config.py
"""
INI configuration for the generator. Everything lives in the [Settings]
section; list values are stored comma separated.
"""
import configparser
import logging
import os

logger = logging.getLogger('Config')

DEFAULT_CONFIG = {
    'seed': 0,
    'min_x': 0.0,
    'min_y': 0.0,
    'width': 10.0,
    'height': 10.0,
    'count_x': 1,
    'count_y': 1,
    'type': 'svg',
    'grid_spacing': 2.5,
    'show_grid': False,
    'partition': False,
    'scale': 40,
    'color1': [205, 255, 255],
    'color2': [0, 0, 255],
    'gamma': [],
}

OUTPUT_TYPES = ('svg', 'svgline', 'png')


def _format(value):
    if isinstance(value, (list, tuple)):
        return ', '.join(str(v).strip() for v in value if str(v).strip())
    return str(value)


def _parse_list(text, cast):
    return [cast(x.strip()) for x in text.replace('(', '').replace(')', '').split(',') if x.strip()]


def write_config_file(path, settings=None):
    """Write a complete configuration, filling gaps from DEFAULT_CONFIG."""
    values = dict(DEFAULT_CONFIG)
    if settings:
        values.update(settings)

    config = configparser.ConfigParser()
    config['Settings'] = {key: _format(value) for key, value in values.items()}
    with open(path, 'w') as configfile:
        config.write(configfile)


def read_config_file(path):
    config = configparser.ConfigParser()
    config.read(path)
    if not config.has_section('Settings'):
        raise ValueError(f"{path} has no [Settings] section")

    section = config['Settings']
    settings = {
        'seed': section.getint('seed', DEFAULT_CONFIG['seed']),
        'min_x': section.getfloat('min_x', DEFAULT_CONFIG['min_x']),
        'min_y': section.getfloat('min_y', DEFAULT_CONFIG['min_y']),
        'width': section.getfloat('width', DEFAULT_CONFIG['width']),
        'height': section.getfloat('height', DEFAULT_CONFIG['height']),
        'count_x': section.getint('count_x', DEFAULT_CONFIG['count_x']),
        'count_y': section.getint('count_y', DEFAULT_CONFIG['count_y']),
        'type': section.get('type', DEFAULT_CONFIG['type']).strip().lower(),
        'grid_spacing': section.getfloat('grid_spacing', DEFAULT_CONFIG['grid_spacing']),
        'show_grid': section.getboolean('show_grid', DEFAULT_CONFIG['show_grid']),
        'partition': section.getboolean('partition', DEFAULT_CONFIG['partition']),
        'scale': section.getint('scale', DEFAULT_CONFIG['scale']),
        'color1': _parse_list(section.get('color1', _format(DEFAULT_CONFIG['color1'])), int),
        'color2': _parse_list(section.get('color2', _format(DEFAULT_CONFIG['color2'])), int),
        'gamma': _parse_list(section.get('gamma', ''), float),
    }

    if settings['type'] not in OUTPUT_TYPES:
        raise ValueError(f"Unknown output type {settings['type']!r}, expected one of {OUTPUT_TYPES}")
    if settings['gamma'] and len(settings['gamma']) != 5:
        raise ValueError(f"gamma needs 5 strip family offsets, got {len(settings['gamma'])}")
    return settings


def update_config_file(path, **kwargs):
    config = configparser.ConfigParser()
    config.read(path)
    if not config.has_section('Settings'):
        config.add_section('Settings')
    for key, value in kwargs.items():
        config.set('Settings', key, _format(value))
    with open(path, 'w') as configfile:
        config.write(configfile)


def initialize_config(path):
    if not os.path.isfile(path):
        logger.info(f"Config file {path} not found. Creating a new one...")
        write_config_file(path)
    return read_config_file(path)
