"""
Runtime validation settings.

Two tiers can be toggled independently: shape checks (ranks, permutations,
support boxes) and numeric checks (nonnegativity, positive total mass, valid
exponents). With both disabled the library trusts its inputs.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

_FALSE_STRINGS = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool = True) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_STRINGS


@dataclass(frozen=True)
class CheckConfig:
    shape_check: bool = True
    numeric_check: bool = True


_checks = CheckConfig(
    shape_check=_env_flag("LATTICE_PMF_SHAPE_CHECK"),
    numeric_check=_env_flag("LATTICE_PMF_NUMERIC_CHECK"),
)


def get_checks() -> CheckConfig:
    return _checks


def set_checks(shape_check: Optional[bool] = None, numeric_check: Optional[bool] = None) -> CheckConfig:
    """Update the active validation tiers. Returns the previous settings."""
    global _checks
    previous = _checks
    updates = {}
    if shape_check is not None:
        updates["shape_check"] = bool(shape_check)
    if numeric_check is not None:
        updates["numeric_check"] = bool(numeric_check)
    _checks = replace(_checks, **updates)
    return previous


@contextmanager
def checks(shape_check: Optional[bool] = None, numeric_check: Optional[bool] = None) -> Iterator[CheckConfig]:
    """
    Temporarily change the validation tiers.

    Usage:
    ------
    with checks(shape_check=False, numeric_check=False):
        Z = add(X, Y)
    """
    global _checks
    previous = set_checks(shape_check=shape_check, numeric_check=numeric_check)
    try:
        yield _checks
    finally:
        _checks = previous
