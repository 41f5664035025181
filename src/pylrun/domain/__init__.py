from .types import Event, Exceed, Report, Result

__all__ = ["Event", "Exceed", "Report", "Result"]
