"""A bounded list of name/value parameter pairs with a shared default instance."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterator

MAX_PARAMETERS = 150
MAX_PARAMETER_LENGTH = 32
MAX_VALUE_LENGTH = 32


@dataclass
class Parameter:
    parameter: str = ""
    value: str = ""


class ParameterList:
    """Holds up to MAX_PARAMETERS pairs; extra additions are ignored."""

    def __init__(self) -> None:
        self._parameters: list[Parameter] = []

    def clear(self) -> None:
        self._parameters.clear()

    def add_parameter(self, parameter: str, value: str) -> None:
        """Append a pair, truncating each part to its maximum length."""
        if len(self._parameters) < MAX_PARAMETERS:
            self._parameters.append(
                Parameter(parameter[:MAX_PARAMETER_LENGTH], value[:MAX_VALUE_LENGTH])
            )

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters)

    def __getitem__(self, index: int) -> Parameter:
        return self._parameters[index]

    def parameter(self, index: int) -> str:
        return self._parameters[index].parameter

    def value(self, index: int) -> str:
        return self._parameters[index].value


@functools.lru_cache(maxsize=None)
def parameter_list() -> ParameterList:
    """The shared ParameterList instance."""
    return ParameterList()