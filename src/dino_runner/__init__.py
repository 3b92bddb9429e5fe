"""
Dino Runner: side-scrolling runner simulation with classic and shooting modes.
"""

from .data_models import GameMode, Phase
from .session import FrameSnapshot, GameSession

__version__ = "1.0.0"

__all__ = ["FrameSnapshot", "GameMode", "GameSession", "Phase"]
