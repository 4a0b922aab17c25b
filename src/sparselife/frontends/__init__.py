"""Frontend interfaces for sparse Game of Life."""

from .cli import CLILife

__all__ = ["CLILife"]
