"""Shared test fixtures."""

import matplotlib
import pandas as pd
import pytest

matplotlib.use('Agg')


def make_rects(rows, fill_name='fill'):
    rects = pd.DataFrame(rows)
    rects.attrs['fill_name'] = fill_name
    return rects


@pytest.fixture
def grouped_rects():
    # two groups, no labels
    return make_rects([
        {'xmin': 0, 'xmax': 50, 'ymin': 0, 'ymax': 100, 'fill': 'a', 'group': 'A'},
        {'xmin': 50, 'xmax': 100, 'ymin': 0, 'ymax': 100, 'fill': 'b', 'group': 'A'},
        {'xmin': 100, 'xmax': 160, 'ymin': 0, 'ymax': 40, 'fill': 'a', 'group': 'BB'},
        {'xmin': 100, 'xmax': 160, 'ymin': 40, 'ymax': 100, 'fill': 'c', 'group': 'BB'},
    ], fill_name='region')


@pytest.fixture
def labeled_rects():
    return make_rects([
        {'xmin': 0, 'xmax': 60, 'ymin': 0, 'ymax': 100, 'fill': 10.0, 'group': 'North', 'label': 'Sales'},
        {'xmin': 60, 'xmax': 100, 'ymin': 0, 'ymax': 60, 'fill': 4.0, 'group': 'North', 'label': 'Ops'},
        {'xmin': 60, 'xmax': 100, 'ymin': 60, 'ymax': 100, 'fill': 2.0, 'group': 'South', 'label': 'Research'},
    ], fill_name='revenue')
