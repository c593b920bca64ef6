"""Simulation backends."""

from pyprobability.simulation.backends.cpu import CPUMatchingBackend

__all__ = ["CPUMatchingBackend"]
