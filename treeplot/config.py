"""
Render options for one treemap plot.

Options use the dotted names below, both in JSON config files and in
RenderConfig.from_options; underscores are accepted in place of dots so the
same names work as python keyword arguments.

- label.colour                 individual label text colour (white)
- label.size.factor            multiplier on individual label sizes (1)
- label.size.threshold         hide individual labels smaller than this
- label.size.fixed             constant individual label size, overrides the factor
- label.groups                 draw group labels (true)
- group.label.colour           group label text colour (darkgrey)
- group.label.size.factor      multiplier on group label sizes (1)
- group.label.size.threshold   hide group labels smaller than this
- group.label.size.fixed       constant group label size, overrides the factor
"""
import json
import os
import warnings
from dataclasses import dataclass, field

from .errors import ConflictingSizeConfig, ConflictingSizeConfigWarning, InvalidInput
from .logger import logger

config_file_path = os.path.expanduser('~/.config/treeplot.json')

OPTION_NAMES = (
    'label.colour',
    'label.size.factor',
    'label.size.threshold',
    'label.size.fixed',
    'label.groups',
    'group.label.colour',
    'group.label.size.factor',
    'group.label.size.threshold',
    'group.label.size.fixed',
)


@dataclass(frozen=True)
class LabelSizing:
    """Size policy for one label category.

    Exactly one of three modes applies: unset (factor 1, no fixed size),
    factor (scaled geometry-derived size) or fixed (constant size).
    """
    factor: float = 1.0
    fixed: float = None
    threshold: float = None

    def __post_init__(self):
        if self.fixed is not None and self.factor != 1:
            raise ConflictingSizeConfig(
                'fixed size %r given together with factor %r' % (self.fixed, self.factor))

    @property
    def mode(self):
        if self.fixed is not None:
            return 'fixed'
        if self.factor != 1:
            return 'factor'
        return 'unset'

    @classmethod
    def resolve(cls, prefix, factor=None, fixed=None, threshold=None):
        """Build a LabelSizing, letting a fixed size win over an explicit factor."""
        if fixed is not None and factor is not None and factor != 1:
            msg = '%s.size.fixed overriding %s.size.factor' % (prefix, prefix)
            logger.warning(msg)
            warnings.warn(msg, ConflictingSizeConfigWarning, stacklevel=3)
            factor = 1
        return cls(
            factor=1.0 if factor is None else float(factor),
            fixed=None if fixed is None else float(fixed),
            threshold=None if threshold is None else float(threshold),
        )


def as_bool(value):
    """JSON and CLI flags may carry booleans as strings ("false", "0", "no")"""
    if isinstance(value, str):
        return value.strip().lower() not in ('false', '0', 'no', 'off', '')
    return bool(value)


@dataclass(frozen=True)
class RenderConfig:
    label_colour: str = 'white'
    label_sizing: LabelSizing = field(default_factory=LabelSizing)
    label_groups: bool = True
    group_label_colour: str = 'darkgrey'
    group_label_sizing: LabelSizing = field(default_factory=LabelSizing)

    @classmethod
    def from_options(cls, options=None):
        """Build a config from a flat mapping of dotted (or underscored) option names."""
        opts = {}
        for k, v in (options or {}).items():
            name = k.replace('_', '.')
            if name not in OPTION_NAMES:
                raise InvalidInput('unknown option: %s' % k)
            if v is not None:
                opts[name] = v

        label_sizing = LabelSizing.resolve(
            'label',
            factor=opts.get('label.size.factor'),
            fixed=opts.get('label.size.fixed'),
            threshold=opts.get('label.size.threshold'),
        )
        group_label_sizing = LabelSizing.resolve(
            'group.label',
            factor=opts.get('group.label.size.factor'),
            fixed=opts.get('group.label.size.fixed'),
            threshold=opts.get('group.label.size.threshold'),
        )
        return cls(
            label_colour=opts.get('label.colour', 'white'),
            label_sizing=label_sizing,
            label_groups=as_bool(opts.get('label.groups', True)),
            group_label_colour=opts.get('group.label.colour', 'darkgrey'),
            group_label_sizing=group_label_sizing,
        )


def parse_config(path=None):
    """Load render options from a JSON file; missing default file means no options."""
    if path is None:
        path = config_file_path
        if not os.path.exists(path):
            return {}
    with open(path) as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise InvalidInput('config file %s must hold a JSON object' % path)
    logger.debug('using config file: %s' % path)
    return config.get('options', config)
