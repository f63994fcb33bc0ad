from .config import LabelSizing, RenderConfig
from .errors import ConflictingSizeConfig, ConflictingSizeConfigWarning, InvalidInput, TreeplotError
from .groups import GroupBox, reduce_groups
from .labels import LabelSpec, SizeScale, plan_group_labels, plan_labels
from .scene import Legend, RectFill, RectStroke, Scene, compose

__version__ = '0.1.0'
