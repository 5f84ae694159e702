"""Selection policies for automated players."""

from unosim.agent.protocol import PriorityPolicy, SelectionPolicy

__all__ = ["PriorityPolicy", "SelectionPolicy"]
