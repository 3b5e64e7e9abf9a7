"""Speaker suggestion frame.

Pages viewers through a shuffled list of past conference speakers, records
whether each should be suggested again and collects free-text suggestions.
"""

from .config import FrameConfig, load_config
from .services.frame_service import FrameRequest, FrameService, FrameView

__version__ = "0.1.0"

__all__ = [
    "FrameConfig",
    "FrameRequest",
    "FrameService",
    "FrameView",
    "load_config",
]
