"""
This module contains various helper functions and classes.
"""
from collections.abc import Mapping

import logging
logger = logging.getLogger(__name__)


def combine_dict(*d, cls=dict, force=False):
    """
    Returns a dict with all keys+values of all dict arguments.
    The first found value wins.

    This recurses if values are dicts.

    Args:
      cls (type): a class to instantiate the result with. Default: dict.
        Often used: :class:`attrdict`.
    """
    res = cls()
    keys = {}
    if not d:
        return res
    if len(d) == 1 and not force:
        return d[0]
    for kv in d:
        if kv is None:
            continue
        for k, v in kv.items():
            keys.setdefault(k, []).append(v)
    for k, v in keys.items():
        if not isinstance(v[0], Mapping):
            res[k] = v[0]
        else:
            res[k] = combine_dict(*(vv for vv in v if isinstance(vv, Mapping)), cls=cls, force=True)
    return res


class attrdict(dict):
    """A dictionary which can be accessed via attributes, for convenience"""

    def __getattr__(self, a):
        if a.startswith("_"):
            return object.__getattribute__(self, a)
        try:
            return self[a]
        except KeyError:
            raise AttributeError(a) from None

    def __setattr__(self, a, b):
        if a.startswith("_"):
            super(attrdict, self).__setattr__(a, b)
        else:
            self[a] = b

    def __delattr__(self, a):
        try:
            del self[a]
        except KeyError:
            raise AttributeError(a) from None


def short_repr(name, data):
    """
    Format ``name‹k=v …›``, the way our iterators and searches show
    themselves.
    """
    return "%s‹%s›" % (name, " ".join("%s=%s" % (k,v) for k,v in data.items()))


class SpiralError(ValueError):
    """Base class for anything that's wrong with a spiral request."""
    pass

class InvalidDistanceError(SpiralError):
    """max_distance must be at least 1: ring 0 is the center."""
    pass

class CoordRangeError(SpiralError):
    """A value doesn't fit into the spiral's coordinate type."""
    pass
