import numpy as np
import pandas as pd
from matplotlib.colors import LinearSegmentedColormap, Normalize, to_hex

from ..utils import format_number

# discrete fill palette, cycled when there are more levels than colors
colormap = [
    "#ff7f7f",
    "#ffbf7f",
    "#ffff00",
    "#7fff7f",
    "#7fffff",
    "#bfbfff",
    "#bfbfbf",
    "#ff7fff",
]

# low/high ends of the continuous fill gradient
gradient = ("#132b43", "#56b1f7")

# missing fill values, both discrete and continuous
na_colour = "#7f7f7f"

n_breaks = 5


def continuous_cmap():
    cmap = LinearSegmentedColormap.from_list('fill', gradient)
    cmap.set_bad(na_colour)
    return cmap


def is_continuous(values):
    return pd.api.types.is_numeric_dtype(values) and not pd.api.types.is_bool_dtype(values)


def levels(values):
    """Distinct values of a discrete fill column, in legend order."""
    if isinstance(values.dtype, pd.CategoricalDtype):
        return list(values.cat.categories)
    unique = list(pd.unique(values.dropna()))
    try:
        return sorted(unique)
    except TypeError:
        return sorted(unique, key=str)


def _continuous(values):
    data = np.ma.masked_invalid(values.to_numpy(dtype=float))
    if data.count() == 0:
        return [na_colour] * len(values), ()

    lo, hi = float(data.min()), float(data.max())
    cmap = continuous_cmap()
    norm = Normalize(vmin=lo, vmax=hi)
    colours = [to_hex(c) for c in cmap(norm(data))]

    if hi > lo:
        breaks = np.linspace(lo, hi, n_breaks)
    else:
        breaks = np.array([lo])
    entries = tuple((format_number(b), to_hex(c)) for b, c in zip(breaks, cmap(norm(breaks))))
    return colours, entries


def fill_colours(values):
    """Resolve a fill column to per-row colors plus legend entries.

    Returns (colours, entries, continuous), entries being (text, color) pairs.
    Missing values get na_colour and no legend entry.
    """
    if is_continuous(values):
        colours, entries = _continuous(values)
        return colours, entries, True

    lv = levels(values)
    lookup = {v: colormap[i % len(colormap)] for i, v in enumerate(lv)}
    colours = [lookup.get(v, na_colour) for v in values]
    entries = tuple((str(v), lookup[v]) for v in lv)
    return colours, entries, False
