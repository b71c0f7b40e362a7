from .base import GenerationStrategy
from .remote import RemoteGenerationService, render_context
from .local import LocalGenerationService

__all__ = [
    "GenerationStrategy",
    "RemoteGenerationService",
    "LocalGenerationService",
    "render_context",
]
