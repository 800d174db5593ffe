from .sequences import as_sequence, trim_common, window

__all__ = ["as_sequence", "trim_common", "window"]
