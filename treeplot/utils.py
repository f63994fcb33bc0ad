import math

REQUIRED_COLUMNS = ('xmin', 'xmax', 'ymin', 'ymax', 'fill')


def label_text(value):
    """Return the display string for a label/group value; missing values become ''"""
    if value is None:
        return ''
    if isinstance(value, float) and math.isnan(value):
        return ''
    return str(value)


def char_count(value):
    return len(label_text(value))


def size_per_char(span, value):
    """Rough font size heuristic: horizontal span divided by character count.

    Empty text has no defined size, it gets 0 so it is never visible.
    """
    n = char_count(value)
    if n == 0:
        return 0.0
    return span / n


def extent(rects):
    """Return (xlim, ylim) covering every rectangle in the frame."""
    xlim = (float(rects['xmin'].min()), float(rects['xmax'].max()))
    ylim = (float(rects['ymin'].min()), float(rects['ymax'].max()))
    return xlim, ylim


def format_number(value):
    """Compact legend text for a numeric break, e.g. 12 or 0.25"""
    return '%g' % value


# scene sizes are in millimetres (ggplot2 convention), renderers work in points
MM_TO_PT = 72.27 / 25.4
