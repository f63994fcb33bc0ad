#!/usr/bin/env python3
"""
treeplot [options] rects.csv -o out.png

rects.csv:  treemap rectangles with xmin, xmax, ymin, ymax, fill columns,
            optionally group and label
options:
- --output=path  OR  -o path        # .svg is written directly, anything else via matplotlib
- --fill-name=name                  # legend title
- --config=path                     # JSON options file, default ~/.config/treeplot.json
- --label-size-factor=F, --label-size-fixed=F, --label-size-threshold=T
- --group-label-size-factor=F, --group-label-size-fixed=F, --group-label-size-threshold=T
- --label-colour=C, --group-label-colour=C, --no-group-labels
- --title=T
- -v / -vv                          # debug / trace logging
"""
import argparse
import sys

import pandas as pd

from .config import RenderConfig, parse_config
from .errors import TreeplotError
from .groups import group_members, reduce_groups
from .logger import logger, set_verbosity
from .renderers import mpl, svg_basic
from .scene import compose


def main(args=None):
    opts = parse_args(args)
    set_verbosity(opts.verbose)

    try:
        options = parse_config(opts.config)
    except (OSError, ValueError) as exc:
        logger.error('cannot read config: %s' % exc)
        return 1

    cli_options = {
        'label.colour': opts.label_colour,
        'label.size.factor': opts.label_size_factor,
        'label.size.fixed': opts.label_size_fixed,
        'label.size.threshold': opts.label_size_threshold,
        'group.label.colour': opts.group_label_colour,
        'group.label.size.factor': opts.group_label_size_factor,
        'group.label.size.fixed': opts.group_label_size_fixed,
        'group.label.size.threshold': opts.group_label_size_threshold,
    }
    if opts.no_group_labels:
        cli_options['label.groups'] = False

    # CLI flags replace config file values
    for k, v in cli_options.items():
        if v is not None:
            options[k] = v

    logger.debug('options:')
    for k, v in options.items():
        logger.debug('  %s: %s' % (k, v))

    try:
        config = RenderConfig.from_options(options)
        rects = load_rects(opts.rects, fill_name=opts.fill_name)
        scene = compose(rects, config)
    except (TreeplotError, OSError, ValueError) as exc:
        logger.error(str(exc))
        return 1

    log_groups(rects)

    if opts.title:
        scene = scene.with_title(opts.title)

    if opts.output.lower().endswith('.svg'):
        svg_basic.render(scene, opts.output, width=opts.width, height=opts.height)
    else:
        mpl.save(scene, opts.output, width=opts.width / 100, height=opts.height / 100)
    return 0


def log_groups(rects):
    if 'group' not in rects.columns:
        return
    logger.debug('groups:')
    for box in reduce_groups(rects):
        logger.debug('  %s: %d rects, %gx%g' % (
            box.group, len(group_members(rects, box.group)), box.width, box.height))


def load_rects(path, fill_name=None):
    """Read a rectangle table from CSV, attaching the legend title."""
    rects = pd.read_csv(path)
    logger.info('loaded %d rects from %s' % (len(rects), path))
    rects.attrs['fill_name'] = fill_name or 'fill'
    return rects


def parse_args(args=None):
    parser = argparse.ArgumentParser(prog='treeplot', description='Draw a precomputed treemap layout.')
    parser.add_argument('rects', help='CSV of treemap rectangles')
    parser.add_argument('-o', '--output', default='treemap.png')
    parser.add_argument('--fill-name', default=None)
    parser.add_argument('--config', default=None)
    parser.add_argument('--title', default=None)
    parser.add_argument('--width', type=int, default=1200, help='pixels')
    parser.add_argument('--height', type=int, default=800, help='pixels')
    parser.add_argument('--label-colour', default=None)
    parser.add_argument('--label-size-factor', type=float, default=None)
    parser.add_argument('--label-size-fixed', type=float, default=None)
    parser.add_argument('--label-size-threshold', type=float, default=None)
    parser.add_argument('--group-label-colour', default=None)
    parser.add_argument('--group-label-size-factor', type=float, default=None)
    parser.add_argument('--group-label-size-fixed', type=float, default=None)
    parser.add_argument('--group-label-size-threshold', type=float, default=None)
    parser.add_argument('--no-group-labels', action='store_true')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser.parse_args(args)


if __name__ == '__main__':
    sys.exit(main())
