"""
Label placement and sizing.

Label font size is derived from the geometry being labeled: the horizontal
span of the box divided by the number of characters in the text. Labels that
end up too small are kept but made fully transparent, so a plot has the same
set of text items whether or not they are shown.

Group labels sit at the group centre, or near the bottom edge when individual
labels also exist (those sit in the top left corner of each rect). Their
threshold is tested against the final, factor-scaled size.

Individual labels are mapped through a global SizeScale when composed. Their
threshold is tested against raw size times factor, not the scaled output.
"""
import math
from dataclasses import dataclass, replace

from .logger import logger
from .utils import label_text, size_per_char

# offsets from the relevant box edge, in plot units
GROUP_LABEL_OFFSET = 2
LABEL_OFFSET = 1

# output range of the individual label size scale, before the factor
LABEL_SIZE_RANGE = (1, 8)


@dataclass(frozen=True)
class LabelSpec:
    text: str
    x: float
    y: float
    size: float
    alpha: float
    colour: str
    ha: str
    va: str
    fontweight: str = 'normal'
    kind: str = 'label'

    @property
    def visible(self):
        return self.alpha > 0


def _alpha(size, threshold):
    if threshold is not None and size < threshold:
        return 0.0
    return 1.0


def plan_group_labels(boxes, config, with_individual_labels=False):
    """One bold, centered label per GroupBox."""
    sizing = config.group_label_sizing
    specs = []
    for box in boxes:
        text = label_text(box.group)
        x = box.xmax - 0.5 * box.width
        if with_individual_labels:
            y = box.ymin + GROUP_LABEL_OFFSET
        else:
            y = box.ymax - 0.5 * box.height

        if not text:
            size, alpha = 0.0, 0.0
        else:
            if sizing.fixed is not None:
                size = sizing.fixed
            else:
                size = size_per_char(box.width, text) * sizing.factor
            alpha = _alpha(size, sizing.threshold)

        logger.trace('group label %r at (%g, %g) size %g alpha %g' % (text, x, y, size, alpha))
        specs.append(LabelSpec(
            text=text, x=x, y=y, size=size, alpha=alpha,
            colour=config.group_label_colour,
            ha='center', va='bottom', fontweight='bold', kind='group',
        ))
    return specs


def plan_labels(rects, config):
    """One label per row, anchored inside the top left corner.

    Sizes are raw (before the global size scale); see SizeScale.
    """
    sizing = config.label_sizing
    specs = []
    columns = zip(rects['label'], rects['xmin'], rects['xmax'], rects['ymax'])
    for label, xmin, xmax, ymax in columns:
        text = label_text(label)
        x = float(xmin) + LABEL_OFFSET
        y = float(ymax) - LABEL_OFFSET

        if not text:
            size, alpha = 0.0, 0.0
        else:
            if sizing.fixed is not None:
                size = sizing.fixed
            else:
                size = size_per_char(float(xmax) - float(xmin), text)
            alpha = _alpha(size * sizing.factor, sizing.threshold)

        logger.trace('label %r at (%g, %g) raw size %g alpha %g' % (text, x, y, size, alpha))
        specs.append(LabelSpec(
            text=text, x=x, y=y, size=size, alpha=alpha,
            colour=config.label_colour,
            ha='left', va='top', kind='label',
        ))
    return specs


@dataclass(frozen=True)
class SizeScale:
    """Area scale from raw label sizes onto [low, high].

    Sizes are rescaled over the range of positive sizes seen in one plot and
    mapped through a square root, so text area grows linearly with the raw
    size. When every label has the same size the whole domain maps to high.
    """
    low: float
    high: float

    @classmethod
    def for_sizing(cls, sizing):
        if sizing.fixed is not None:
            return cls(LABEL_SIZE_RANGE[0], sizing.fixed)
        return cls(LABEL_SIZE_RANGE[0] * sizing.factor, LABEL_SIZE_RANGE[1] * sizing.factor)

    def map(self, values):
        domain = [v for v in values if v > 0 and math.isfinite(v)]
        if not domain:
            return [0.0 for v in values]
        vmin, vmax = min(domain), max(domain)

        out = []
        for v in values:
            if not (v > 0 and math.isfinite(v)):
                out.append(0.0)
            elif vmax == vmin:
                out.append(float(self.high))
            else:
                t = (v - vmin) / (vmax - vmin)
                out.append(self.low + (self.high - self.low) * math.sqrt(t))
        return out


def scale_labels(specs, scale):
    """Return specs with sizes mapped through scale"""
    sizes = scale.map([s.size for s in specs])
    return [replace(s, size=size) for s, size in zip(specs, sizes)]
