from .repository import ShiftRepository

__all__ = [
    "ShiftRepository",
]
