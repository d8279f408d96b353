"""Utility modules for collection exports."""

from .progress_tracker import ProgressTracker

__all__ = ["ProgressTracker"]
