from .log_options import LogOptions
from .severity import Severity

__all__ = ["LogOptions", "Severity"]
