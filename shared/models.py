from typing import Optional, Literal, get_args
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

SupportedLanguage = Literal["javascript", "typescript", "python", "go", "rust"]
SUPPORTED_LANGUAGES = get_args(SupportedLanguage)


class CodeMetrics(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    line_count: int = Field(ge=0)
    function_count: int = Field(ge=0)
    complexity_score: int = Field(ge=0, le=100)
    estimated_read_time: str


class ReviewResult(BaseModel):
    """Outcome of a single review: either review text plus metrics, or an error."""

    review: Optional[str] = None
    metrics: Optional[CodeMetrics] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_review_or_error(self):
        if (self.review is None) == (self.error is None):
            raise ValueError("exactly one of review or error must be set")
        if self.error is not None and self.metrics is not None:
            raise ValueError("an error result cannot carry metrics")
        return self

    @classmethod
    def failed(cls, message: str) -> "ReviewResult":
        return cls(error=message)
