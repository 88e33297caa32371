"""
Week Planner GUI Module

PySide6-based graphical interface for the planner.
"""

from .main_window import MainWindow

__all__ = ['MainWindow']
