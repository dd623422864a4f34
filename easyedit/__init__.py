"""A small modal terminal text editor with undo, selection and clipboard support."""

__version__ = "0.1.0"