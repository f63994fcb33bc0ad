"""Tests for the treeplot command."""

import json
import logging

import pandas as pd
import pytest

from treeplot import cli


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setattr('treeplot.config.config_file_path', str(tmp_path / 'absent.json'))


@pytest.fixture
def rects_csv(tmp_path, labeled_rects):
    path = tmp_path / 'rects.csv'
    labeled_rects.to_csv(path, index=False)
    return path


def test_writes_svg(rects_csv, tmp_path):
    out = tmp_path / 'out.svg'
    assert cli.main([str(rects_csv), '-o', str(out), '--fill-name', 'Revenue', '--title', 'Q1']) == 0
    svg = out.read_text()
    assert '>Revenue</text>' in svg
    assert '>Sales</text>' in svg


def test_writes_png(rects_csv, tmp_path):
    out = tmp_path / 'out.png'
    assert cli.main([str(rects_csv), '-o', str(out), '--no-group-labels']) == 0
    assert out.stat().st_size > 0


def test_cli_flags_override_config_file(rects_csv, tmp_path):
    config = tmp_path / 'treeplot.json'
    config.write_text(json.dumps({'options': {'label.size.fixed': 2, 'label.colour': 'black'}}))
    out = tmp_path / 'out.svg'
    rc = cli.main([str(rects_csv), '-o', str(out), '--config', str(config), '--label-size-fixed', '5'])
    assert rc == 0
    svg = out.read_text()
    assert 'fill="black"' in svg
    assert 'font-size="%.2fpt"' % (5 * 72.27 / 25.4) in svg


def test_bad_input_returns_error(tmp_path):
    path = tmp_path / 'bad.csv'
    pd.DataFrame([{'xmin': 0, 'xmax': 1}]).to_csv(path, index=False)
    assert cli.main([str(path), '-o', str(tmp_path / 'out.svg')]) == 1
    assert not (tmp_path / 'out.svg').exists()


def test_load_rects_sets_fill_name(rects_csv):
    rects = cli.load_rects(str(rects_csv), fill_name='Revenue')
    assert rects.attrs['fill_name'] == 'Revenue'
    assert len(rects) == 3


def test_missing_csv_returns_error(tmp_path):
    assert cli.main([str(tmp_path / 'absent.csv'), '-o', str(tmp_path / 'out.svg')]) == 1


def test_missing_config_returns_error(rects_csv, tmp_path):
    rc = cli.main([str(rects_csv), '-o', str(tmp_path / 'out.svg'), '--config', str(tmp_path / 'absent.json')])
    assert rc == 1


def test_malformed_config_returns_error(rects_csv, tmp_path):
    config = tmp_path / 'treeplot.json'
    config.write_text('{"options": ')
    assert cli.main([str(rects_csv), '-o', str(tmp_path / 'out.svg'), '--config', str(config)]) == 1


def test_string_false_disables_group_labels(rects_csv, tmp_path):
    config = tmp_path / 'treeplot.json'
    config.write_text(json.dumps({'options': {'label.groups': 'false'}}))
    out = tmp_path / 'out.svg'
    assert cli.main([str(rects_csv), '-o', str(out), '--config', str(config)]) == 0
    svg = out.read_text()
    assert '>North</text>' not in svg
    assert '>Sales</text>' in svg


def test_log_groups_summarises_members(labeled_rects, caplog):
    with caplog.at_level(logging.DEBUG, logger='treeplot'):
        cli.log_groups(labeled_rects)
    assert 'North: 2 rects, 100x100' in caplog.text
    assert 'South: 1 rects, 40x40' in caplog.text
