# -*- coding: utf-8 -*-
"""
choices

Enums whose members carry a stored value and a human readable label.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, List


class LabeledChoices:
    """Helpers shared by :class:`StrChoices` and :class:`IntChoices`."""

    label: str

    @classmethod
    def values(cls) -> List[Any]:
        """Return the stored values of every member in declaration order."""
        return [member.value for member in cls]  # type: ignore[attr-defined]


class StrChoices(LabeledChoices, str, Enum):
    """Members are declared as ``NAME = ("value", "Label")``."""

    def __new__(cls, value: str, label: str):
        member = str.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    def __str__(self) -> str:
        return str(self.value)


class IntChoices(LabeledChoices, IntEnum):
    """Members are declared as ``NAME = (0, "Label")``."""

    def __new__(cls, value: int, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["StrChoices", "IntChoices"]

# The End
