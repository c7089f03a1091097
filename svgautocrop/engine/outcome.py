"""Closed result type returned by the rewrite and recolor engines.

``Success`` - the step completed.
``Deferral`` - the step cannot complete yet; the caller rolls back and retries on a later pass.
``Fatal`` - the step failed for good; the caller rolls back and raises ``error``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from svgautocrop.errors import AutocropError


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class Deferral:
    reason: str


@dataclass(frozen=True)
class Fatal:
    error: AutocropError


Outcome = Union[Success, Deferral, Fatal]

SUCCESS = Success()
