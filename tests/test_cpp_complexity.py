"""C++ support through the tree-sitter C++ grammar."""

import textwrap

import pytest

from mccabe_insight import AnalysisConfig, analyze_source
from mccabe_insight.parsing import get_supported_languages

pytestmark = pytest.mark.skipif(
    "cpp" not in get_supported_languages(), reason="tree-sitter C++ grammar not installed"
)

CPP = AnalysisConfig(language="cpp")


def _lines(source):
    return [r.to_line() for r in analyze_source(textwrap.dedent(source), CPP)]


class TestCppFunctions:
    def test_namespace_function(self):
        source = """\
            namespace util {
            int sign(int a) { return a > 0 ? 1 : 0; }
            }
            """
        assert _lines(source) == ["2 sign 2"]

    def test_qualified_method_definition(self):
        source = """\
            int Counter::next() {
                if (value_ > 10) return 0;
                return ++value_;
            }
            """
        assert _lines(source) == ["1 next 2"]

    def test_inline_member_function(self):
        source = """\
            struct Box {
                int get() const { return ok && value; }
                int value;
                bool ok;
            };
            """
        assert _lines(source) == ["2 get 2"]

    def test_extern_c_block(self):
        source = """\
            extern "C" {
            int c_api(int a) { while (a) a--; return a; }
            }
            """
        assert _lines(source) == ["2 c_api 2"]

    def test_range_for(self):
        source = """\
            int sum(const std::vector<int> &xs) {
                int s = 0;
                for (int x : xs) s += x;
                return s;
            }
            """
        assert _lines(source) == ["1 sum 2"]

    def test_reference_return_type(self):
        source = """\
            int &slot(int *xs, int i) {
                return i < 0 ? xs[0] : xs[i];
            }
            """
        assert _lines(source) == ["1 slot 2"]

    def test_function_pointer_return_type(self):
        source = """\
            int (*pick(bool fast))(int) {
                return fast ? nullptr : nullptr;
            }
            """
        assert _lines(source) == ["1 pick 2"]
