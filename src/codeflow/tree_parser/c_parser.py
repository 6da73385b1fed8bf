from .custom_parser import CustomParser


class CParser(CustomParser):
    extensions = (".c", ".h")

    def condition_text(self, if_node):
        """Text of the parenthesized condition of an if_statement, parentheses included."""
        condition = if_node.child_by_field_name("condition")
        return self.source_text(condition)
