"""
ai/gemini_translator.py
-----------------------
Uses Google Gemini to translate free text into a target language.

Responsibilities:
    - Build the single-string translation prompt.
    - Await the model and return only the translated text.
    - Signal an empty model answer as EmptyResponseError.

Transport and API errors raised by the SDK are not caught here; the
dispatch pipeline decides what the user sees.
"""

from typing import Any, Optional

import google.generativeai as genai

from config import GEMINI_API_KEY, MODEL
from utils.logger import get_logger

logger = get_logger(__name__)


class EmptyResponseError(RuntimeError):
    """The model answered without any text."""


def build_prompt(text: str, target: str) -> str:
    """
    Build the translation instruction for the model.

    Args:
        text: Text to translate, in any language.
        target: Target-language code, e.g. "en" or "tr".

    Returns:
        The prompt as one newline-joined string.
    """
    return "\n".join(
        [
            "You are a professional translator.",
            f'Task: Detect the input language and translate it into "{target}".',
            "Rules: Keep punctuation, emojis, and line breaks. Respond ONLY with the translated text.",
            "",
            "Text to translate:",
            text,
        ]
    )


class GeminiTranslator:
    """Thin async wrapper around a Gemini GenerativeModel."""

    def __init__(
        self,
        api_key: str = GEMINI_API_KEY,
        model_name: str = MODEL,
        model: Optional[Any] = None,
    ) -> None:
        """
        Args:
            api_key: Gemini API key.
            model_name: Model identifier, e.g. "models/gemini-2.0-flash".
            model: Pre-built model object (anything with `generate_content_async`).
                When given, no SDK configuration happens.
        """
        self.model_name = model_name
        if model is None:
            genai.configure(api_key=api_key)
            model = genai.GenerativeModel(model_name)
        self._model = model

    async def translate(self, text: str, target: str = "en") -> str:
        """
        Translate text into the target language.

        Raises:
            EmptyResponseError: If the model returned no text.
        """
        response = await self._model.generate_content_async(build_prompt(text, target))
        out = response.text
        if not out or not out.strip():
            raise EmptyResponseError("Empty response from model")
        logger.info(f"Gemini translated {len(text)} chars into '{target}'")
        return out.strip()
