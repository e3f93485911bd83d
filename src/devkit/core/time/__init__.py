from devkit.core.time.abc import Time
from devkit.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
