"""
DataSource protocol.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class DataSource(Protocol[T_co]):
    """Produces the intermediate record(s) one fragment is built from."""

    def fetch(self) -> T_co:
        ...
