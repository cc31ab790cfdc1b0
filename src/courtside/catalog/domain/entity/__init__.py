from .court import Court
from .sport import Sport

__all__ = ["Court", "Sport"]
