from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator


@dataclass
class Settings:
    """process-wide knobs shared by every container"""
    # python -O strips range checks, the same way a release build would
    range_checks: bool = __debug__
    # doubling past this is reported as an allocation failure
    max_capacity: int = 2 ** 31 - 1


settings = Settings()


def configure(**changes) -> Settings:
    """update the shared settings in place and return them"""
    known = {f.name for f in fields(Settings)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"unknown setting(s): {', '.join(sorted(unknown))}")
    if 'max_capacity' in changes and changes['max_capacity'] < 0:
        raise ValueError("max_capacity must be non-negative")
    for name, value in changes.items():
        setattr(settings, name, value)
    return settings


@contextmanager
def overrides(**changes) -> Iterator[Settings]:
    """temporarily change settings, restoring the previous values on exit"""
    saved = replace(settings)
    configure(**changes)
    try:
        yield settings
    finally:
        for f in fields(Settings):
            setattr(settings, f.name, getattr(saved, f.name))
