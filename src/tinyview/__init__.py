"""PySide6 viewer for TINY source files."""
