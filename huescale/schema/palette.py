# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""Palette value type used by the preset catalogs."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Optional, overload


@dataclass(frozen=True, slots=True)
class Palette:
    """
    An ordered tonal scale with an optional primary marker.

    Behaves like a read-only sequence of hex strings, so ``palette[5]``,
    ``len(palette)`` and iteration work as on the plain lists returned by the
    generators.

    Attributes:
        colors: Lowercase ``#rrggbb`` strings, lightest first
        primary: The entry standing for the seed color, if designated
    """
    colors: tuple[str, ...]
    primary: Optional[str] = None

    def __len__(self) -> int:
        return len(self.colors)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index):
        return self.colors[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d: dict = {"colors": list(self.colors)}
        if self.primary is not None:
            d["primary"] = self.primary
        return d

    @classmethod
    def from_dict(cls, data: Mapping) -> Palette:
        """Deserialize from dictionary."""
        return cls(
            colors=tuple(data["colors"]),
            primary=data.get("primary"),
        )
