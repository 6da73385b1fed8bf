from loguru import logger
from tree_sitter import Parser

from .. import get_language_map
from ..exceptions import ParseFailure, UnimplementedHookError
from ..utils.src_parser import find_error_node


class CustomParser:
    """
    Thin wrapper around a tree-sitter parser for one source unit.

    The syntax tree is produced eagerly; a tree containing ERROR or missing
    nodes is rejected with ParseFailure rather than handed on half-built.
    """

    def __init__(self, src_language, src_code):
        self.src_language = src_language
        if isinstance(src_code, str):
            src_code = src_code.encode("utf-8")
        self.src_code = src_code

        language_map = get_language_map()
        if src_language not in language_map:
            raise UnimplementedHookError(f"No tree-sitter grammar wired for language '{src_language}'")
        self.language = language_map[src_language]

        self.tree = self.parse()
        self.root_node = self.tree.root_node

    def parse(self):
        parser = Parser(self.language)
        tree = parser.parse(self.src_code)
        error_node = find_error_node(tree)
        if error_node is not None:
            line, column = error_node.start_point
            kind = "missing " + error_node.type if error_node.is_missing else "syntax error"
            logger.debug(f"tree-sitter {kind} at {line + 1}:{column + 1}")
            raise ParseFailure(
                f"{self.src_language}: {kind} at line {line + 1}, column {column + 1}",
                line=line + 1,
                column=column + 1,
            )
        return tree

    def source_text(self, node):
        return self.src_code[node.start_byte:node.end_byte].decode("utf-8")
