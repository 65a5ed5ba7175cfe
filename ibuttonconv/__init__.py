"""Conversion of Cyfral and Metakom iButton key codes into Dallas DS1990 codes."""

__version__ = "0.1.0"

__all__ = ["cli", "converters", "options"]