"""Language model driver implementations."""

from .base import ToneAdjustmentDriver
from .openai_driver import OpenAICompatibleDriver

__all__ = [
    "ToneAdjustmentDriver",
    "OpenAICompatibleDriver",
]
