from .loader import load_config
from .models import (
    OutputConfig,
    RefcheckConfig,
)

__all__ = [
    "OutputConfig",
    "RefcheckConfig",
    "load_config",
]
