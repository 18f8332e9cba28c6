"""
Gemini model client management.
"""
from google import genai
from google.genai import types
import logging
from typing import Optional
from medvoice.core.config import get_settings
from medvoice.core.exceptions import ModelProviderError

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPE = "image/jpeg"


class ModelManager:
    """Owns the shared Gemini client and issues generation calls."""

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        """Initialize the Gemini client from settings unless overridden."""
        settings = get_settings()
        self.model_name = model_name or settings.GEMINI_MODEL
        api_key = api_key if api_key is not None else settings.GEMINI_API_KEY

        self.client = None
        if api_key:
            try:
                self.client = genai.Client(api_key=api_key)
                logger.info("Gemini client initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize Gemini client: {str(e)}")
        else:
            logger.warning("GEMINI_API_KEY not found in environment")

    async def generate(
        self,
        prompt: str,
        image: Optional[bytes] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate text for a prompt, optionally with an inline JPEG image.

        Args:
            prompt: Prompt text
            image: Raw image bytes sent as an inline part
            max_tokens: Output token budget enforced by the provider

        Raises:
            ModelProviderError: If the call fails or yields no text
        """
        if self.client is None:
            raise ModelProviderError("Gemini client not initialized")

        contents = [prompt]
        if image is not None:
            contents.append(types.Part.from_bytes(data=image, mime_type=IMAGE_MIME_TYPE))

        logger.debug(f"Sending request to {self.model_name} with prompt: {prompt[:50]}")
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=types.GenerateContentConfig(max_output_tokens=max_tokens)
            )
            text = response.text
        except Exception as e:
            logger.error(f"Gemini processing error: {str(e)}")
            raise ModelProviderError(f"Gemini request failed: {str(e)}") from e

        if not text:
            logger.error("Empty response from Gemini")
            raise ModelProviderError("Gemini returned no text")
        return text


# Global instance
model_manager = ModelManager()
