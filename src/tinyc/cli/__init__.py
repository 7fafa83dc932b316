"""
Command Line Interface for tinyc.

Commands: `parse`, `compile` and `exec`. See `tinyc.cli.__main__`.
"""
