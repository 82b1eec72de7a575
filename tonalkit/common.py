"""
NB: this module cannot import anything from tonalkit itself
"""
from __future__ import annotations
import logging as _logging
import functools as _functools

import typing as _t


__all__ = (
    'getLogger',
    'logger',
    'num_t',
    'isNumber',
)


num_t: _t.TypeAlias = _t.Union[int, float]


def isNumber(x) -> bool:
    """
    True if x can be used as a midinote or a frequency

    bools are excluded, even if they are ints
    """
    return isinstance(x, (int, float)) and not isinstance(x, bool)


@_functools.cache
def getLogger(name: str,
              fmt='[%(name)s:%(filename)s:%(lineno)s:%(funcName)s:%(levelname)s] %(message)s',
              filelog: str = '',
              force=True
              ) -> _logging.Logger:
    """
    Construct a logger

    Args:
        name: the name of the logger
        fmt: the format used
        filelog: if given, logging info is **also** output to this file
        force: set own handlers, even if the logger already exists

    Returns:
        the logger
    """
    logger = _logging.getLogger(name)
    if logger.hasHandlers():
        # an old logger
        if not force:
            return logger
        logger.handlers.clear()

    logger.propagate = False
    handler = _logging.StreamHandler()
    formatter = _logging.Formatter(fmt)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if filelog:
        filehandler = _logging.FileHandler(filelog)
        filehandler.setFormatter(formatter)
        logger.addHandler(filehandler)
    return logger


logger = getLogger('tonalkit')
logger.setLevel('WARNING')
