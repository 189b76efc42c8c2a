"""Console manager for Malaysian states and federal territories: record store, prompts, menus and CSV report."""

__version__ = "1.0.0"
__all__ = ["data", "helpers", "ui", "main"]