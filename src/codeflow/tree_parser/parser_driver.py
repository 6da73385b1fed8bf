from .c_parser import CParser
from .cpp_parser import CppParser
from ..exceptions import UnimplementedHookError


class ParserDriver:
    def __init__(self, src_language, src_code):
        self.src_language = src_language
        self.parser_map = {
            "c": CParser,
            "cpp": CppParser,
        }
        if self.src_language not in self.parser_map:
            raise UnimplementedHookError(f"No parser wired for language '{src_language}'")

        self.parser = self.parser_map[self.src_language](src_language, src_code)
        self.root_node = self.parser.root_node
        self.src_code = self.parser.src_code
