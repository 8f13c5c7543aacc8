"""
Configuration.

A configuration is a (YAML) mapping, merged over :data:`DEFAULT_CFG`::

    spiral:
      metric: euclidean
      center: [10, 20]
      max_distance: 5
      ctype: i16
      lut: false
    search:
      checkpoint: 64
      n_results: 1
    log:
      level: info

If there's a ``logging`` entry, it's passed to
:func:`logging.config.dictConfig` instead of using ``log.level``.
"""
import logging
import os
from collections.abc import Mapping

import yaml

from .util import attrdict, combine_dict, SpiralError
from .const import Metric
from .metric import as_metric
from .coord import coord_type
from .search import SpiralSearch
from . import spiral as _spiral

logger = logging.getLogger(__name__)

DEFAULT_CFG = attrdict(
        spiral=attrdict(
            metric="manhattan",
            center=[0, 0],
            max_distance=1,
            ctype="int",
            lut=False,
            ),
        search=attrdict(
            checkpoint=64,
            n_results=1,
            ),
        log=attrdict(
            level="info",
            ),
        )


def load_config(cfg=None):
    """
    Read a configuration and merge it with the defaults.

    Args:
      cfg: a file name, an open file, a mapping, or ``None`` for the
        plain defaults.
    """
    if cfg is None:
        data = {}
    elif isinstance(cfg, Mapping):
        data = cfg
    elif isinstance(cfg, (str, os.PathLike)):
        with open(cfg, "r") as f:
            data = yaml.safe_load(f)
        logger.info("Config loaded from %s", cfg)
    else:
        data = yaml.safe_load(cfg)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise SpiralError("Config must be a mapping, not %s" % (type(data).__name__,))
    cfg = combine_dict(data, DEFAULT_CFG, cls=attrdict)
    for k in DEFAULT_CFG:
        if not isinstance(cfg[k], Mapping):
            raise SpiralError("%s: must be a mapping, not %r" % (k, cfg[k]))
    return cfg


def spiral_from_config(cfg):
    """
    Build the spiral iterator described by ``cfg.spiral``.
    """
    sc = cfg.spiral
    try:
        x, y = sc.center
    except (TypeError, ValueError):
        raise SpiralError("spiral.center: need two coordinates, not %r" % (sc.center,)) from None
    metric = as_metric(sc.metric)
    kw = dict(ctype=coord_type(sc.ctype))
    if metric is Metric.EUCLIDEAN:
        kw["lut"] = bool(sc.lut)
    return _spiral(metric, x, y, sc.max_distance, **kw)


def setup_logging(cfg, debug=False):
    """
    Configure logging from ``cfg``.
    """
    if cfg.get('logging'):
        from logging.config import dictConfig
        lc = cfg['logging']
        if debug:
            lc.setdefault('root',{})['level'] = 'DEBUG'
        dictConfig(lc)
    else:
        try:
            level = getattr(logging, cfg.log['level'].upper())
        except AttributeError:
            raise SpiralError("log.level: unknown level %r" % (cfg.log['level'],)) from None
        logging.basicConfig(level=logging.DEBUG if debug else level)


def search_from_config(cfg, checker, spiral=None):
    """
    Build a :class:`gridspiral.search.SpiralSearch` as described by
    ``cfg.search``, walking ``spiral`` or, by default, the one
    ``cfg.spiral`` describes.
    """
    if spiral is None:
        spiral = spiral_from_config(cfg)
    return SpiralSearch(spiral, checker, n_results=cfg.search.n_results, checkpoint=cfg.search.checkpoint)
