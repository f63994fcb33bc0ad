class TreeplotError(Exception):
    """Base class for treeplot errors."""


class InvalidInput(TreeplotError, ValueError):
    """Input is not a table of rectangles, or lacks a required column."""


class ConflictingSizeConfig(TreeplotError, ValueError):
    """A label category was given both a fixed size and a scaling factor."""


class ConflictingSizeConfigWarning(UserWarning):
    """A fixed label size overrode an explicit scaling factor."""
