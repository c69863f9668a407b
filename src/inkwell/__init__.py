"""Inkwell: a multi-user blog API with owner-only mutations."""

__version__ = "0.1.0"
