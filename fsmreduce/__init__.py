"""Reduction and minimization of Mealy and Moore finite-state machines."""

__version__ = "0.1.0"
__all__ = ["automaton", "cli", "mealy", "moore", "splitting"]