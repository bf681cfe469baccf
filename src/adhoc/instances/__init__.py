"""Witnesses for the containers and element types shipped with adhoc."""

from adhoc.instances.lst import FList
from adhoc.instances.numeric import TFloat, TInt, TStr
from adhoc.instances.option import MOption, MOptionUnsafe

__all__ = [
    'FList',
    'MOption',
    'MOptionUnsafe',
    'TFloat',
    'TInt',
    'TStr',
]
