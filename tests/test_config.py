"""Tests for render options and size-mode resolution."""

import json
import warnings

import pytest

from treeplot.config import LabelSizing, RenderConfig, parse_config
from treeplot.errors import ConflictingSizeConfig, ConflictingSizeConfigWarning, InvalidInput


class TestLabelSizing:
    def test_modes(self):
        assert LabelSizing().mode == 'unset'
        assert LabelSizing(factor=0.5).mode == 'factor'
        assert LabelSizing(fixed=4).mode == 'fixed'

    def test_direct_conflict_is_rejected(self):
        with pytest.raises(ConflictingSizeConfig):
            LabelSizing(factor=2, fixed=4)

    def test_resolve_prefers_fixed_and_warns(self, caplog):
        with pytest.warns(ConflictingSizeConfigWarning, match='label.size.fixed overriding'):
            sizing = LabelSizing.resolve('label', factor=2, fixed=4)
        assert sizing == LabelSizing(factor=1.0, fixed=4.0)
        assert 'label.size.fixed overriding label.size.factor' in caplog.text

    def test_resolve_neutral_factor_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            sizing = LabelSizing.resolve('label', factor=1, fixed=4)
        assert sizing.mode == 'fixed'


class TestRenderConfig:
    def test_defaults(self):
        config = RenderConfig.from_options()
        assert config == RenderConfig()
        assert config.label_colour == 'white'
        assert config.group_label_colour == 'darkgrey'
        assert config.label_groups is True
        assert config.label_sizing.mode == 'unset'

    def test_dotted_and_underscored_names(self):
        a = RenderConfig.from_options({'group.label.size.fixed': 12, 'label.groups': False})
        b = RenderConfig.from_options({'group_label_size_fixed': 12, 'label_groups': False})
        assert a == b
        assert a.group_label_sizing.fixed == 12
        assert a.label_groups is False

    def test_group_conflict_warns_per_category(self):
        with pytest.warns(ConflictingSizeConfigWarning, match='group.label.size.fixed'):
            config = RenderConfig.from_options({
                'group.label.size.fixed': 12,
                'group.label.size.factor': 3,
                'label.size.factor': 0.5,
            })
        assert config.group_label_sizing == LabelSizing(fixed=12)
        assert config.label_sizing == LabelSizing(factor=0.5)

    def test_unknown_option_rejected(self):
        with pytest.raises(InvalidInput):
            RenderConfig.from_options({'label.size.factr': 2})


class TestParseConfig:
    def test_reads_options_section(self, tmp_path):
        path = tmp_path / 'treeplot.json'
        path.write_text(json.dumps({'options': {'label.colour': 'black'}}))
        assert parse_config(str(path)) == {'label.colour': 'black'}

    def test_reads_flat_file(self, tmp_path):
        path = tmp_path / 'treeplot.json'
        path.write_text(json.dumps({'label.size.threshold': 3}))
        assert parse_config(str(path)) == {'label.size.threshold': 3}

    def test_missing_default_file_is_empty(self, tmp_path, monkeypatch):
        monkeypatch.setattr('treeplot.config.config_file_path', str(tmp_path / 'absent.json'))
        assert parse_config() == {}


class TestBooleanOptions:
    @pytest.mark.parametrize('value', [False, 'false', 'False', '0', 'no', 'off'])
    def test_falsy_label_groups(self, value):
        assert RenderConfig.from_options({'label.groups': value}).label_groups is False

    @pytest.mark.parametrize('value', [True, 'true', 'yes', '1', 1])
    def test_truthy_label_groups(self, value):
        assert RenderConfig.from_options({'label.groups': value}).label_groups is True

    def test_non_object_config_file_rejected(self, tmp_path):
        path = tmp_path / 'treeplot.json'
        path.write_text('[1, 2]')
        with pytest.raises(InvalidInput):
            parse_config(str(path))
