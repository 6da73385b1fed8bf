from .CFG_c import CFGGraph_c
from ...utils import cpp_nodes


class CFGGraph_cpp(CFGGraph_c):
    """
    C++ builder.

    Shares the C wiring; the construct tables add classes, namespaces,
    range-for and try blocks. Methods defined inside a class body are
    definitions nested in the class definition, each with its own empty
    body frame. Template wrappers are transparent and access specifiers
    produce no node.
    """

    statement_types = cpp_nodes.statement_types
