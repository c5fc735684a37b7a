import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Real environment variables win over .env
load_dotenv(override=False)

DEFAULT_MODEL = "mistral-small-latest"
DEFAULT_ENDPOINT = "https://api.mistral.ai/v1/chat/completions"
DEFAULT_TEMPERATURE = 0.3


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class Config:
    mistral_api_key: str = ""
    mistral_model: str = DEFAULT_MODEL
    mistral_endpoint: str = DEFAULT_ENDPOINT
    temperature: float = DEFAULT_TEMPERATURE
    timeout: Optional[float] = None
    allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.mistral_api_key)

    @classmethod
    def from_env(cls) -> "Config":
        origins = [o.strip() for o in os.getenv("ALLOW_ORIGINS", "*").split(",") if o.strip()]
        temperature = _optional_float(os.getenv("REVIEW_TEMPERATURE"))
        return cls(
            mistral_api_key=os.getenv("MISTRAL_API_KEY", "").strip(),
            mistral_model=os.getenv("MISTRAL_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            mistral_endpoint=os.getenv("MISTRAL_ENDPOINT", DEFAULT_ENDPOINT).strip() or DEFAULT_ENDPOINT,
            temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
            timeout=_optional_float(os.getenv("LLM_TIMEOUT_SECS")),
            allow_origins=origins or ["*"],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


config = Config.from_env()
