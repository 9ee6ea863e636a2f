"""Prompt building and image generation utilities."""

from .generator_client import GenerationRequest, ImageGenerationError, ImageGeneratorClient, LogoUpload
from .prompt_builder import BrandingDetails, PromptBuilder, PromptValidationError, ThemeStyle

__all__ = [
    "BrandingDetails",
    "GenerationRequest",
    "ImageGenerationError",
    "ImageGeneratorClient",
    "LogoUpload",
    "PromptBuilder",
    "PromptValidationError",
    "ThemeStyle",
]
