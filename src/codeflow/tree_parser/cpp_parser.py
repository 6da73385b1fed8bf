from .custom_parser import CustomParser
from ..utils.c_nodes import get_child_of_type


class CppParser(CustomParser):
    extensions = (".cc", ".cpp", ".cxx", ".c++", ".hpp", ".hh", ".hxx", ".h++")

    def condition_text(self, if_node):
        """
        Text of the condition of an if_statement.

        tree-sitter-cpp wraps the condition in a condition_clause, which keeps
        the parentheses and any init-statement (`if (int x = f(); x)`).
        `if constexpr` keeps its keyword in the label.
        """
        condition = if_node.child_by_field_name("condition")
        text = self.source_text(condition)
        if get_child_of_type(if_node, ["constexpr"]) is not None:
            return "constexpr " + text
        return text
