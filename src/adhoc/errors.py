"""Contract violation errors raised by Option construction, extraction and dispatch."""

from __future__ import annotations

__all__ = [
    'ArgumentNullError',
    'ContractViolationError',
    'ValueIsNullError',
]


class ContractViolationError(Exception):
    """Base class for programming-contract violations.

    These are never transient: the caller broke a precondition and the
    operation that detected it is aborted.
    """


class ValueIsNullError(ContractViolationError, ValueError):
    """A present value (or a safe handler result) was None.

    Raised by `some(None)`, by a lazy producer returning None, and by the
    safe policy whenever a transform or fallback yields None.
    """

    def __init__(self, context: str | None = None) -> None:
        self.context = context
        msg = 'Value is None'
        if context:
            msg = f'{context}: {msg}'
        super().__init__(msg)


class ArgumentNullError(ContractViolationError, TypeError):
    """A required function, producer or witness argument was None."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Argument '{name}' must not be None")
