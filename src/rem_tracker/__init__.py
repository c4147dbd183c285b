"""Rem: a text-command task tracker (todos, deadlines, events)."""

__version__ = "0.1.0"
