import math
import re

from shared.models import CodeMetrics

# JavaScript's \s (WhiteSpace and LineTerminator) and its ASCII-only \w
JS_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
JS_SPACE_CLASS = f"[{JS_WHITESPACE}]"
JS_WORD_CLASS = "[A-Za-z0-9_]"
_JS_BLANK = re.compile(f"{JS_SPACE_CLASS}*")


def _js_pattern(source: str):
    return re.compile(source.replace(r"\s", JS_SPACE_CLASS).replace(r"\w", JS_WORD_CLASS))


def is_blank(text: str) -> bool:
    """True when text is empty after a JavaScript-style trim."""
    return _JS_BLANK.fullmatch(text) is not None


# Each pattern is counted separately; one construct can match several
JS_FUNCTION_PATTERNS = [
    _js_pattern(r"function\s+\w+"),            # function name()
    _js_pattern(r"const\s+\w+\s*=\s*\("),      # const name = (
    _js_pattern(r"\w+\s*:\s*\([^)]*\)\s*=>"),  # name: () =>
    _js_pattern(r"\w+\s*\([^)]*\)\s*\{"),      # name() {
]

FUNCTION_PATTERNS = {
    "javascript": JS_FUNCTION_PATTERNS,
    "typescript": JS_FUNCTION_PATTERNS,
    "python": [_js_pattern(r"def\s+\w+")],
    "go": [_js_pattern(r"func\s+(?:\w+\s*)?\(")],
    "rust": [_js_pattern(r"fn\s+\w+")],
}

NESTING_CHARS = re.compile(r"[{}()\[\]]")

LINES_PER_MINUTE = 10


class Analyzer:
    def analyze(self, code: str, language: str) -> CodeMetrics:
        # 1. Size
        line_count = self._count_lines(code)

        # 2. Function declarations
        function_count = self._count_functions(code, language)

        # 3. Complexity score from size, functions and bracket density
        nesting = len(NESTING_CHARS.findall(code))
        complexity_score = self._complexity_score(line_count, function_count, nesting)

        return CodeMetrics(
            line_count=line_count,
            function_count=function_count,
            complexity_score=complexity_score,
            estimated_read_time=self._read_time(line_count),
        )

    def _count_lines(self, code: str) -> int:
        return sum(1 for line in code.split("\n") if not is_blank(line))

    def _count_functions(self, code: str, language: str) -> int:
        patterns = FUNCTION_PATTERNS.get(language, [])
        return sum(len(pattern.findall(code)) for pattern in patterns)

    def _complexity_score(self, line_count: int, function_count: int, nesting: int) -> int:
        raw = line_count * 0.5 + function_count * 5 + nesting * 0.3
        # Math.round: halves round up
        return min(100, math.floor(raw + 0.5))

    def _read_time(self, line_count: int) -> str:
        minutes = max(1, math.ceil(line_count / LINES_PER_MINUTE))
        return "1 minute" if minutes == 1 else f"{minutes} minutes"


def estimate(code: str, language: str) -> CodeMetrics:
    """Compute line count, function count, complexity score and read time.

    Never fails; empty input yields zero counts and a one minute read time.
    """
    return Analyzer().analyze(code, language)
