from abc import ABC, abstractmethod
from typing import Any


class ToneAdjustmentDriver(ABC):
    """Abstract base class for language model drivers."""

    @abstractmethod
    async def adjust(self, text: str, system_prompt: str, model_config: dict[str, Any]) -> str:
        """Return text rewritten according to the system prompt."""
        pass
