import pytest

from codeflow.codeviews.CFG.CFG import CFGGraph
from codeflow.codeviews.CFG.CFG_driver import CFGDriver
from codeflow.exceptions import ParseFailure, UnimplementedHookError
from codeflow.tree_parser.c_parser import CParser
from codeflow.tree_parser.parser_driver import ParserDriver


def test_parser_driver_accepts_text():
    driver = ParserDriver("c", "int x = 1;\n")

    assert driver.root_node.type == "translation_unit"
    assert driver.src_code == b"int x = 1;\n"


def test_parse_failure_reports_position():
    with pytest.raises(ParseFailure) as excinfo:
        ParserDriver("c", "int main( {\n")

    assert excinfo.value.line in (1, 2)
    assert excinfo.value.column >= 1
    assert "line" in str(excinfo.value)


def test_parse_failure_aborts_the_build():
    with pytest.raises(ParseFailure):
        CFGDriver("cpp", "class { int\n")


def test_unknown_language():
    with pytest.raises(UnimplementedHookError):
        CFGDriver("rust", "fn main() {}")
    with pytest.raises(UnimplementedHookError):
        ParserDriver("rust", "fn main() {}")


def test_unwired_hooks_abort_the_traversal():
    parser = CParser("c", "a();")
    graph = CFGGraph("c", parser.src_code, parser.root_node, parser)

    with pytest.raises(UnimplementedHookError):
        graph.build()
    with pytest.raises(NotImplementedError):
        graph.definition_parts(parser.root_node)


def test_condition_text():
    parser = CParser("c", "if (a && b) x();")
    if_node = parser.root_node.named_children[0]

    assert parser.condition_text(if_node) == "(a && b)"
