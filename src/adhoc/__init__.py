"""adhoc: witness-based type classes and a null-safe Option for Python 3.13+.

Flat imports (preferred):
    from adhoc import Option, Nothing, some, optional, lazy
    from adhoc import MOption, MOptionUnsafe, FList, TInt, TFloat, TStr

Submodule imports (for organization):
    from adhoc.typeclass import fmap, bind, apply, apply2, fold, add
    from adhoc.prelude import map_opt, match_opt, add_opt
"""

from adhoc._config import AdhocConfig, get_config, init
from adhoc._logging import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook
from adhoc.errors import ArgumentNullError, ContractViolationError, ValueIsNullError
from adhoc.option import Nothing, Option, lazy, optional, some

# Witnesses
from adhoc.instances import FList, MOption, MOptionUnsafe, TFloat, TInt, TStr

# Type classes
from adhoc.typeclass import NoInstanceError, Unit, Witness, unit

__all__ = [
    # Config
    'AdhocConfig',
    # Errors
    'ArgumentNullError',
    'ContractViolationError',
    # Witnesses
    'FList',
    'MOption',
    'MOptionUnsafe',
    'NoInstanceError',
    # Option
    'Nothing',
    'Option',
    'TFloat',
    'TInt',
    'TStr',
    'Unit',
    'ValueIsNullError',
    'Witness',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'init',
    'lazy',
    'optional',
    'remove_log_hook',
    'some',
    'unit',
]
