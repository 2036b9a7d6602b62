"""Simulated users for exercising the API."""

from .sim import ISim, Sim

__all__ = ["ISim", "Sim"]
