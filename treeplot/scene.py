"""
Compose a treemap scene from a table of precomputed rectangles.

The scene is an ordered tuple of immutable draw instructions, painted first to
last, plus the plot extent and legend. Renderers in treeplot.renderers turn a
scene into matplotlib figures or SVG text.

Draw order:
- filled rects, colored by fill
- thin grey rect borders
- thick grey group borders (grouped input only)
- group labels (grouped input, label_groups enabled)
- individual labels (input has a label column)
"""
from dataclasses import dataclass, replace

import pandas as pd

from .config import RenderConfig
from .errors import InvalidInput
from .groups import reduce_groups
from .labels import LabelSpec, SizeScale, plan_group_labels, plan_labels, scale_labels
from .logger import logger
from .renderers.colormap import fill_colours
from .utils import REQUIRED_COLUMNS, extent

BORDER_COLOUR = 'grey'
RECT_BORDER_WIDTH = 0.2
GROUP_BORDER_WIDTH = 1.2
PANEL_BORDER_WIDTH = 2


@dataclass(frozen=True)
class RectFill:
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    colour: str


@dataclass(frozen=True)
class RectStroke:
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    colour: str
    linewidth: float


@dataclass(frozen=True)
class Legend:
    title: str
    entries: tuple
    continuous: bool = False


@dataclass(frozen=True)
class Scene:
    instructions: tuple
    xlim: tuple
    ylim: tuple
    legend: Legend
    panel_border: RectStroke = None
    show_axes: bool = False
    title: str = None

    @property
    def group_labels(self):
        return [i for i in self.instructions if isinstance(i, LabelSpec) and i.kind == 'group']

    @property
    def labels(self):
        return [i for i in self.instructions if isinstance(i, LabelSpec) and i.kind == 'label']

    def with_title(self, title):
        return replace(self, title=title)


def validate(rects):
    if not isinstance(rects, pd.DataFrame):
        raise InvalidInput('Must provide a data frame, got %s' % type(rects).__name__)
    missing = [c for c in REQUIRED_COLUMNS if c not in rects.columns]
    if missing:
        raise InvalidInput('missing required columns: %s' % ', '.join(missing))
    if len(rects) == 0:
        raise InvalidInput('no rectangles to draw')


def compose(rects, config=None, **options):
    """Build the Scene for one treemap.

    rects: DataFrame with xmin, xmax, ymin, ymax, fill and optionally group
    and label columns. rects.attrs['fill_name'] titles the legend.
    config: a RenderConfig; alternatively pass options as keyword arguments
    (label_size_factor=0.5, group_label_size_fixed=12, ...).
    """
    validate(rects)
    if config is None:
        config = RenderConfig.from_options(options)
    elif options:
        raise InvalidInput('pass either config or keyword options, not both')

    grouped = 'group' in rects.columns
    labeled = 'label' in rects.columns
    logger.debug('label sizing: %s, group label sizing: %s' % (
        config.label_sizing.mode, config.group_label_sizing.mode))
    xlim, ylim = extent(rects)

    coords = list(zip(rects['xmin'], rects['xmax'], rects['ymin'], rects['ymax']))
    colours, entries, continuous = fill_colours(rects['fill'])

    instructions = []
    for (xmin, xmax, ymin, ymax), colour in zip(coords, colours):
        instructions.append(RectFill(float(xmin), float(xmax), float(ymin), float(ymax), colour))
    for xmin, xmax, ymin, ymax in coords:
        instructions.append(RectStroke(float(xmin), float(xmax), float(ymin), float(ymax),
                                       BORDER_COLOUR, RECT_BORDER_WIDTH))

    panel_border = None
    boxes = []
    if grouped:
        boxes = reduce_groups(rects)
        for box in boxes:
            instructions.append(RectStroke(box.xmin, box.xmax, box.ymin, box.ymax,
                                           BORDER_COLOUR, GROUP_BORDER_WIDTH))
        panel_border = RectStroke(xlim[0], xlim[1], ylim[0], ylim[1],
                                  BORDER_COLOUR, PANEL_BORDER_WIDTH)

    if grouped and config.label_groups:
        instructions.extend(plan_group_labels(boxes, config, with_individual_labels=labeled))

    if labeled:
        scale = SizeScale.for_sizing(config.label_sizing)
        instructions.extend(scale_labels(plan_labels(rects, config), scale))

    legend = Legend(
        title=rects.attrs.get('fill_name', 'fill'),
        entries=entries,
        continuous=continuous,
    )
    scene = Scene(
        instructions=tuple(instructions),
        xlim=xlim,
        ylim=ylim,
        legend=legend,
        panel_border=panel_border,
    )
    hidden = sum(1 for i in instructions if isinstance(i, LabelSpec) and not i.visible)
    logger.debug('composed scene: %d rects, %d groups, %d labels (%d hidden)' % (
        len(coords), len(boxes), len(scene.group_labels) + len(scene.labels), hidden))
    return scene
