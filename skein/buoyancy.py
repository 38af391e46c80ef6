"""Buoyancy-driven mixing that restores a stable temperature profile.

Temperatures are in kelvin and volumes in cubic metres.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Layer:
    """A single fully mixed layer of fluid."""

    temperature: float
    volume: float


@dataclass(frozen=True)
class _Block:
    """A contiguous run of mixed layers, from ``first`` to ``last`` inclusive."""

    first: int
    last: int
    temperature: float
    volume: float

    def merge_with_below(self, below: "_Block") -> "_Block":
        total = self.volume + below.volume
        mixed = (self.temperature * self.volume + below.temperature * below.volume) / total
        return _Block(below.first, self.last, mixed, total)


def apply_buoyancy(layers: Iterable[Layer]) -> list[float]:
    """Mix unstable adjacent layers until temperatures rise from bottom to top.

    Layers are given bottom first.  Mixing uses volume-weighted averages, so
    thermal energy is conserved for constant density and specific heat.
    Returns one temperature per layer.
    """
    stack: list[_Block] = []
    count = 0
    for index, layer in enumerate(layers):
        block = _Block(index, index, layer.temperature, layer.volume)
        while stack and stack[-1].temperature > block.temperature:
            block = block.merge_with_below(stack.pop())
        stack.append(block)
        count = index + 1

    temperatures = [0.0] * count
    for block in stack:
        for i in range(block.first, block.last + 1):
            temperatures[i] = block.temperature
    return temperatures