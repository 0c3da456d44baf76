"""VisionClient — abstract base for the receipt inference collaborator."""
from abc import ABC, abstractmethod

from src.models import InferenceRequest


class VisionClient(ABC):
    @abstractmethod
    async def generate(self, request: InferenceRequest) -> str:
        """Send a built request and return the model's raw text. Raises on failure."""
        ...
