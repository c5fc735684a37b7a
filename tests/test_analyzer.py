
import pytest
import sys
import os

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reviewer.analyzer import Analyzer, estimate, is_blank

class TestAnalyzer:
    @pytest.fixture
    def analyzer(self):
        return Analyzer()

    def test_python_scenario(self):
        metrics = estimate("def f():\n    return 1", "python")

        assert metrics.line_count == 2
        assert metrics.function_count == 1
        # 2*0.5 + 1*5 + 2 brackets*0.3 = 6.6
        assert metrics.complexity_score == 7
        assert metrics.estimated_read_time == "1 minute"

    def test_blank_lines_are_not_counted(self, analyzer):
        assert analyzer._count_lines("a\n\n   \n\t\nb\n") == 2

    def test_empty_input(self):
        metrics = estimate("", "python")

        assert metrics.line_count == 0
        assert metrics.function_count == 0
        assert metrics.complexity_score == 0
        assert metrics.estimated_read_time == "1 minute"

    @pytest.mark.parametrize("code", ["x", "print('hi')", "   return a + b   "])
    def test_single_line(self, code):
        metrics = estimate(code, "javascript")
        assert metrics.line_count == 1
        assert metrics.estimated_read_time == "1 minute"

    def test_javascript_double_counts_named_function(self):
        # "function add" and "add(a, b) {" both match
        code = "function add(a, b) {\n  return a + b;\n}"
        metrics = estimate(code, "javascript")

        assert metrics.function_count == 2
        # 3*0.5 + 2*5 + 4*0.3 = 12.7
        assert metrics.complexity_score == 13

    def test_typescript_uses_javascript_patterns(self, analyzer):
        code = (
            "const load = (id: string) => fetch(id);\n"
            "const handlers = { onClick: (e) => e };\n"
        )
        # const name = (  and  onClick: (e) =>
        assert analyzer._count_functions(code, "typescript") == 2
        assert analyzer._count_functions(code, "javascript") == 2

    def test_go_functions_and_methods(self, analyzer):
        code = "func main() {\n}\nfunc (s *Server) Start() {\n}"
        assert analyzer._count_functions(code, "go") == 2

    def test_rust_functions(self, analyzer):
        code = "fn main() {}\nfn helper(x: i32) -> i32 { x }"
        assert analyzer._count_functions(code, "rust") == 2

    def test_python_methods(self, analyzer):
        code = "class A:\n    def a(self):\n        pass\n    async def b(self):\n        pass\n"
        assert analyzer._count_functions(code, "python") == 2

    @pytest.mark.parametrize("language", ["ruby", "", "Python", "java"])
    def test_unsupported_language_has_no_functions(self, language):
        metrics = estimate("def foo():\n    fn bar() {}\nfunction baz() {}", language)
        assert metrics.function_count == 0

    def test_rounds_half_up(self):
        # 1 line, no functions, no brackets: raw score 0.5
        assert estimate("x", "python").complexity_score == 1

    def test_complexity_is_clamped(self):
        metrics = estimate("def f(): return [(1, 2)]\n" * 500, "python")

        assert metrics.complexity_score == 100
        assert metrics.line_count == 500

    @pytest.mark.parametrize("lines,expected", [
        (1, "1 minute"),
        (10, "1 minute"),
        (11, "2 minutes"),
        (25, "3 minutes"),
    ])
    def test_read_time(self, lines, expected):
        code = "\n".join(["x = 1"] * lines)
        assert estimate(code, "python").estimated_read_time == expected

    def test_estimate_is_idempotent(self):
        code = "function a() {}\nconst b = () => {};\n"
        assert estimate(code, "javascript") == estimate(code, "javascript")

    def test_metrics_serialize_camel_case(self):
        data = estimate("def f():\n    return 1", "python").model_dump(by_alias=True)
        assert data == {
            "lineCount": 2,
            "functionCount": 1,
            "complexityScore": 7,
            "estimatedReadTime": "1 minute",
        }

    def test_unicode_whitespace_separates_keywords(self):
        # NBSP, as pasted from a browser
        assert estimate("def\xa0f():\n    return 1", "python").function_count == 1
        assert estimate("function\xa0add(a) {\n}", "javascript").function_count == 2
        assert estimate("fn\u3000main() {}", "rust").function_count == 1

    def test_word_characters_are_ascii_only(self, analyzer):
        # JavaScript's \w is ASCII only
        assert analyzer._count_functions("def é():\n    pass", "python") == 0

    def test_blank_lines_use_javascript_trim(self, analyzer):
        # \x1c-\x1f are not trimmed; NBSP and BOM are
        assert analyzer._count_lines("a\n\x1c\n\x1f\x1f\nb") == 4
        assert analyzer._count_lines("a\n\xa0\ufeff\n \nb") == 2

    @pytest.mark.parametrize("text,expected", [
        ("", True),
        (" \t\r\v\f", True),
        ("\xa0  \u3000\ufeff", True),
        ("\x1c", False),
        ("\x85", False),
        (" x ", False),
    ])
    def test_is_blank(self, text, expected):
        assert is_blank(text) is expected
