import tree_sitter_c
import tree_sitter_cpp
from tree_sitter import Language

__version__ = "0.1.0"

SUPPORTED_LANGUAGES = ("c", "cpp")


def get_language_map():
    C_LANGUAGE = Language(tree_sitter_c.language())
    CPP_LANGUAGE = Language(tree_sitter_cpp.language())

    return {
        "c": C_LANGUAGE,
        "cpp": CPP_LANGUAGE,
    }


def generate(src_code, src_language="c"):
    """Build the CFG for `src_code` and return it rendered as flowchart text."""
    from .codeviews.CFG.CFG_driver import CFGDriver

    return CFGDriver(src_language, src_code).flowchart
