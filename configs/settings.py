from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from core.api.gemini_client import GeminiConfig
from core.conversation.history import HistoryConfig
from core.conversation.prompts import ACKNOWLEDGEMENT, SYSTEM_PROMPT
from core.speech.sanitizer import MAX_SPEECH_CHARS


load_dotenv()


class Settings:
    """
    Central configuration for the Oracle voice runtime.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties. The core never reads the
    environment itself; it receives HistoryConfig / GeminiConfig values built
    here.
    """

    def __init__(self) -> None:
        # Gemini / model configuration
        self._gemini_api_key = os.getenv("GEMINI_API_KEY")
        self._gemini_model = os.getenv("ORACLE_GEMINI_MODEL", "gemini-2.5-flash-lite")
        self._gemini_base_url = os.getenv(
            "ORACLE_GEMINI_BASE_URL",
            "https://generativelanguage.googleapis.com/v1beta",
        )
        self._temperature = float(os.getenv("ORACLE_TEMPERATURE", "0.7"))
        self._max_output_tokens = int(os.getenv("ORACLE_MAX_OUTPUT_TOKENS", "200"))
        self._http_timeout = float(os.getenv("ORACLE_HTTP_TIMEOUT", "10.0"))

        # Conversation / speech limits
        self._max_history_turns = int(os.getenv("ORACLE_MAX_HISTORY_TURNS", "4"))
        self._max_speech_chars = int(
            os.getenv("ORACLE_MAX_SPEECH_CHARS", str(MAX_SPEECH_CHARS))
        )

        self._session_max_age = float(os.getenv("ORACLE_SESSION_MAX_AGE", "3600"))

        self._log_level = os.getenv("ORACLE_LOG_LEVEL", "INFO").upper()

    # ------------------------------------------------------------------
    # Gemini settings
    # ------------------------------------------------------------------

    @property
    def gemini_api_key(self) -> Optional[str]:
        # A missing key is not fatal here; Gemini rejects the call and the
        # runtime answers with its apology.
        return self._gemini_api_key

    @property
    def gemini_model(self) -> str:
        return self._gemini_model

    @property
    def gemini_base_url(self) -> str:
        return self._gemini_base_url.rstrip("/")

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def max_output_tokens(self) -> int:
        return self._max_output_tokens

    @property
    def http_timeout(self) -> float:
        return self._http_timeout

    # ------------------------------------------------------------------
    # Conversation settings
    # ------------------------------------------------------------------

    @property
    def max_history_turns(self) -> int:
        return self._max_history_turns

    @property
    def max_speech_chars(self) -> int:
        return self._max_speech_chars

    @property
    def session_max_age(self) -> float:
        return self._session_max_age

    @property
    def log_level(self) -> str:
        return self._log_level

    # ------------------------------------------------------------------
    # Explicit config values handed to the core
    # ------------------------------------------------------------------

    def gemini_config(self) -> GeminiConfig:
        return GeminiConfig(
            api_key=self.gemini_api_key or "",
            model=self.gemini_model,
            base_url=self.gemini_base_url,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            timeout_s=self.http_timeout,
        )

    def history_config(self) -> HistoryConfig:
        return HistoryConfig(
            system_prompt=SYSTEM_PROMPT,
            acknowledgement=ACKNOWLEDGEMENT,
            max_history_turns=self.max_history_turns,
        )


settings = Settings()
