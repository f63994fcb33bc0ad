from dataclasses import dataclass

from .errors import InvalidInput
from .logger import logger


@dataclass(frozen=True)
class GroupBox:
    group: object
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self):
        return self.xmax - self.xmin

    @property
    def height(self):
        return self.ymax - self.ymin


def _sorted_keys(keys):
    try:
        return sorted(keys)
    except TypeError:
        # mixed key types
        return sorted(keys, key=str)


def reduce_groups(rects, key='group'):
    """Bounding box of each group of rectangles.

    One pass collects the running min/max per group value, so row order does
    not matter. Boxes come back sorted by group value.
    """
    if key not in rects.columns:
        raise InvalidInput('cannot reduce groups: no "%s" column' % key)

    bounds = {}
    columns = zip(rects[key], rects['xmin'], rects['xmax'], rects['ymin'], rects['ymax'])
    for group, xmin, xmax, ymin, ymax in columns:
        if group not in bounds:
            bounds[group] = [xmin, xmax, ymin, ymax]
            continue
        b = bounds[group]
        b[0] = min(b[0], xmin)
        b[1] = max(b[1], xmax)
        b[2] = min(b[2], ymin)
        b[3] = max(b[3], ymax)

    boxes = []
    for group in _sorted_keys(bounds):
        xmin, xmax, ymin, ymax = bounds[group]
        boxes.append(GroupBox(group, float(xmin), float(xmax), float(ymin), float(ymax)))
    logger.debug('reduced %d rects to %d groups' % (len(rects), len(boxes)))
    return boxes


def group_members(rects, group, key='group'):
    """Rows belonging to one group value"""
    if key not in rects.columns:
        raise InvalidInput('no "%s" column' % key)
    return rects[rects[key] == group]
