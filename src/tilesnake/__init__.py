# src/tilesnake/__init__.py
"""Tick-based Snake: engine, controls, timer driver and pygame front end."""

from .engine import GameEngine, RunState, Snapshot

__all__ = ["GameEngine", "RunState", "Snapshot"]
