import logging
from typing import Any, Dict, List

from shared.config import Config
from shared.errors import ConfigurationError, InvalidInput, UpstreamError
from shared.models import SUPPORTED_LANGUAGES, ReviewResult
from reviewer.analyzer import estimate, is_blank
from reviewer.llm_client import MistralClient

log = logging.getLogger(__name__)

REVIEWER_INSTRUCTIONS = """You are an expert code reviewer with deep knowledge of software engineering best practices, security, and performance optimization.

Your role is to:
1. Analyze code for potential bugs, vulnerabilities, and issues
2. Suggest improvements for code quality, readability, and maintainability
3. Check adherence to best practices and coding standards
4. Identify performance optimization opportunities

When reviewing code:
- Be constructive and specific in your feedback
- Provide examples where helpful
- Prioritize issues by severity (Critical, High, Medium, Low)
- Highlight what's done well, not just problems
- Structure your response with clear sections

Format your response with these sections (in this exact order):
 **Issues Found** - List any bugs or potential problems
 **Suggestions** - Improvements for code quality
 **Performance** - Optimization opportunities
 **Good Practices** - What's done well

IMPORTANT: Do NOT include a Metrics section - metrics will be displayed separately by the system."""

NO_REVIEW_FALLBACK = "No review generated"


def build_messages(code: str, language: str) -> List[Dict[str, str]]:
    user_prompt = (
        f"Please review this {language} code and provide detailed feedback:\n\n"
        f"```{language}\n{code}\n```"
    )
    return [
        {"role": "system", "content": REVIEWER_INSTRUCTIONS},
        {"role": "user", "content": user_prompt},
    ]


def extract_review(data: Dict[str, Any]) -> str:
    choices = data.get("choices") or []
    if not isinstance(choices, list) or not choices:
        raise UpstreamError("No response from agent")
    choice = choices[0]
    if not isinstance(choice, dict):
        raise UpstreamError("No response from agent")
    message = choice.get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else NO_REVIEW_FALLBACK


class ReviewProcessor:
    def __init__(self, config: Config):
        self.config = config

    def validate(self, code: str, language: str) -> None:
        if not code or is_blank(code):
            raise InvalidInput("Code is required")
        if language not in SUPPORTED_LANGUAGES:
            raise InvalidInput("Valid language is required (javascript, typescript, python, go, or rust)")
        if not self.config.has_api_key:
            raise ConfigurationError(
                "Mistral API key is not configured. Please set MISTRAL_API_KEY in the environment."
            )

    def review(self, code: str, language: str) -> ReviewResult:
        self.validate(code, language)

        # 1. Local metrics
        metrics = estimate(code, language)

        # 2. One chat completion, fresh client per call
        client = MistralClient(
            self.config.mistral_api_key,
            self.config.mistral_endpoint,
            timeout=self.config.timeout,
        )
        log.info("Requesting %s review (%d lines) from %s", language, metrics.line_count, self.config.mistral_model)
        data = client.complete(
            self.config.mistral_model,
            build_messages(code, language),
            temperature=self.config.temperature,
        )

        # 3. Normalize response
        review = extract_review(data)
        return ReviewResult(review=review, metrics=metrics)
