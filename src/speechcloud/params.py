#!/usr/bin/python3
"""Resolution of optional, variadic selector parameters."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULTED = "defaulted"
EXTRA_IGNORED = "extra_ignored"


@dataclass(frozen=True)
class ParamDiagnostic:
    """Event describing how a selector list was resolved."""
    name: str
    supplied: int
    kind: str


ParamObserver = Callable[[ParamDiagnostic], None]


def resolve_param(
    params: Optional[Sequence[T]],
    factory: Callable[[], T],
    name: str,
    observer: Optional[ParamObserver] = None,
) -> T:
    """Reduce zero, one or many selectors to exactly one.

    Args:
        params: Selectors passed by the caller (may be empty or None)
        factory: Builds the default selector when none were passed
        name: Label used in diagnostics (usually the calling operation)
        observer: Optional callable notified with a ParamDiagnostic

    Returns:
        The first selector, or a default one when none were given
    """
    if not params:
        logger.info(f"{name}() received no args, using a new {_type_name(factory)}")
        if observer is not None:
            observer(ParamDiagnostic(name, 0, DEFAULTED))
        return factory()

    if len(params) > 1:
        logger.warning(
            f"{name}() received {len(params)} args, using only the first and ignoring the rest"
        )
        if observer is not None:
            observer(ParamDiagnostic(name, len(params), EXTRA_IGNORED))

    return params[0]


def _type_name(factory: Callable) -> str:
    return getattr(factory, "__name__", repr(factory))
