"""Regulatory limit table and its environment overrides."""

import os
from dataclasses import fields, replace
from typing import Mapping, Optional

from .types import RegulatoryLimits

ENV_PREFIX = "WTD_"

DEFAULT_LIMITS = RegulatoryLimits()


def load_limits(
    environ: Optional[Mapping[str, str]] = None,
    base: RegulatoryLimits = DEFAULT_LIMITS,
) -> RegulatoryLimits:
    """
    Build the process-wide limit table.

    Any field of RegulatoryLimits can be overridden with an environment
    variable named WTD_<FIELD>, e.g. WTD_MAX_DAILY_WORKING_TIME=12.

    Args:
        environ: Mapping to read overrides from (defaults to os.environ)
        base: Limits to start from

    Returns:
        RegulatoryLimits with overrides applied
    """
    environ = os.environ if environ is None else environ

    overrides = {}
    invalid = []
    for f in fields(RegulatoryLimits):
        raw = environ.get(ENV_PREFIX + f.name.upper())
        if raw is None or not raw.strip():
            continue

        current = getattr(base, f.name)
        try:
            if isinstance(current, str):
                overrides[f.name] = raw.strip()
            elif isinstance(current, int):
                overrides[f.name] = int(raw)
            else:
                overrides[f.name] = float(raw)
        except ValueError:
            invalid.append(f"{ENV_PREFIX}{f.name.upper()}={raw!r}")

    if invalid:
        raise RuntimeError(
            f"Invalid regulatory limit overrides: {', '.join(invalid)}. "
            "Please set numeric values in your .env file."
        )

    if not overrides:
        return base
    return replace(base, **overrides)
