from .CFG import CFGGraph, Construct
from ...utils import c_nodes


class CFGGraph_c(CFGGraph):
    statement_types = c_nodes.statement_types

    def __init__(self, src_language, src_code, root_node, parser):
        super().__init__(src_language, src_code, root_node, parser)

        self.node_store = self.build()
        self.graph = self.to_networkx()

    def classify(self, node):
        if not node.is_named or node.type in self.statement_types["ignored_types"]:
            return Construct.IGNORED
        if node.type in self.statement_types["branch_statement"]:
            return Construct.BRANCH
        if node.type in self.statement_types["definition_types"]:
            # Forward declarations and bodiless specifiers stay plain statements
            if c_nodes.get_definition_body(node) is None:
                return Construct.SEQUENTIAL
            return Construct.DEFINITION
        if node.type in self.statement_types["block_types"]:
            return Construct.BLOCK
        if node.type in self.statement_types["unsupported_statement"]:
            return Construct.UNSUPPORTED
        return Construct.SEQUENTIAL

    def block_children(self, node):
        if node.type in self.statement_types["preproc_blocks"]:
            return c_nodes.get_preproc_items(node)
        return super().block_children(node)

    def branch_parts(self, node):
        label = "if " + self.parser.condition_text(node)
        consequence = node.child_by_field_name("consequence")
        alternative = node.child_by_field_name("alternative")
        return label, consequence, alternative

    def definition_parts(self, node):
        label = c_nodes.get_definition_header(node, self.parser.src_code)
        return label, c_nodes.get_definition_body(node)
