"""
Gemini API Client

Wrapper for Google Gemini (via LangChain) that returns schema-validated
structured output. Any failure is raised as InferenceError.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Type, TypeVar, Union
from enum import Enum
from datetime import datetime

from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel, ValidationError

from medsimplify import config as settings
from medsimplify.utils import get_logger, InferenceError

logger = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class GeminiModel(str, Enum):
    """Gemini models usable for report simplification."""
    FLASH_2_5 = "gemini-2.5-flash"  # Stable standard
    FLASH_2_5_LITE = "gemini-2.5-flash-lite"
    PRO_2_5 = "gemini-2.5-pro"
    FLASH_2_0 = "gemini-2.0-flash"


@dataclass
class GeminiConfig:
    """Configuration for Gemini client."""
    api_key: Optional[str] = field(default_factory=lambda: settings.GEMINI_API_KEY or None)
    model: Union[GeminiModel, str] = field(default_factory=lambda: settings.GEMINI_MODEL)
    temperature: float = field(default_factory=lambda: settings.GEMINI_TEMPERATURE)

    max_output_tokens: int = 4096
    top_p: float = 0.8
    top_k: int = 40
    
    request_timeout_seconds: int = field(default_factory=lambda: settings.GEMINI_TIMEOUT_SECONDS)
    # Single attempt; the simplifier falls back instead of retrying
    max_retries: int = 0


class GeminiClient:
    """
    Client for Google Gemini API.

    Used to rewrite medical reports in plain language - NOT for diagnosis.
    """
    
    def __init__(self, config: Optional[GeminiConfig] = None):
        """
        Initialize Gemini client.
        
        Args:
            config: Optional configuration, uses defaults if not provided
        """
        self.config = config or GeminiConfig()
        self._llm = None
        self._request_count = 0
        self._failure_count = 0
        self._last_request_time: Optional[datetime] = None
        self._initialized = False
        
        self._initialize()
    
    def _initialize(self):
        """Initialize the Gemini model using LangChain."""
        if not self.config.api_key:
            logger.warning("No Gemini API key provided - simplifier will run in demo mode")
            self._initialized = False
            return

        try:
            self._llm = ChatGoogleGenerativeAI(
                model=self._model_name,
                temperature=self.config.temperature,
                max_output_tokens=self.config.max_output_tokens,
                top_p=self.config.top_p,
                top_k=self.config.top_k,
                timeout=self.config.request_timeout_seconds,
                max_retries=self.config.max_retries,
                google_api_key=self.config.api_key,
            )
            self._initialized = True
            logger.info(f"LangChain Gemini client initialized with model: {self._model_name}")

        except Exception as e:
            logger.error(f"Failed to initialize LangChain Gemini: {e}")
            self._initialized = False

    @property
    def is_available(self) -> bool:
        """Check if Gemini is available for use."""
        return self._initialized

    @property
    def _model_name(self) -> str:
        """Resolve model name whether config.model is an enum or a plain string."""
        m = self.config.model
        return m.value if hasattr(m, "value") else str(m)

    async def generate_structured(self, prompt: str, schema: Type[SchemaT]) -> SchemaT:
        """
        Run one structured generation call.

        Args:
            prompt: Fully rendered prompt text
            schema: Pydantic model the response must conform to

        Returns:
            An instance of ``schema``

        Raises:
            InferenceError: client unavailable, transport/quota failure,
                or a response that does not match the schema
        """
        if not self.is_available:
            raise InferenceError("Gemini client is not configured", model=self._model_name)

        start_time = datetime.now()
        self._request_count += 1
        self._last_request_time = start_time

        try:
            structured_llm = self._llm.with_structured_output(schema)
            result = await structured_llm.ainvoke(prompt)
        except Exception as e:
            self._failure_count += 1
            raise InferenceError(
                f"Gemini generation failed: {e}",
                model=self._model_name,
                details={"exception": type(e).__name__},
            ) from e

        try:
            parsed = self._coerce(result, schema)
        except (ValidationError, TypeError) as e:
            self._failure_count += 1
            raise InferenceError(
                f"Gemini response did not match {schema.__name__}: {e}",
                model=self._model_name,
                details={"exception": type(e).__name__},
            ) from e

        latency = (datetime.now() - start_time).total_seconds() * 1000
        logger.info(f"Gemini structured response received in {latency:.0f} ms")
        return parsed

    @staticmethod
    def _coerce(result: Any, schema: Type[SchemaT]) -> SchemaT:
        """Accept a schema instance or a plain dict; reject anything else."""
        if isinstance(result, schema):
            return result
        if isinstance(result, dict):
            return schema.model_validate(result)
        raise TypeError(f"expected {schema.__name__}, got {type(result).__name__}")

    def get_stats(self) -> Dict[str, Any]:
        """Get client statistics."""
        return {
            "is_available": self.is_available,
            "model": self._model_name,
            "request_count": self._request_count,
            "failure_count": self._failure_count,
            "last_request": self._last_request_time.isoformat() if self._last_request_time else None
        }
