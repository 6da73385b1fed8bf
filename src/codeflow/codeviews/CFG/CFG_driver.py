from loguru import logger

from .CFG_c import CFGGraph_c
from .CFG_cpp import CFGGraph_cpp
from ...exceptions import UnimplementedHookError
from ...tree_parser.parser_driver import ParserDriver
from ...utils import postprocessor


class CFGDriver:
    def __init__(
        self,
        src_language="c",
        src_code="",
        output_file=None,
        json_file=None,
    ):
        self.src_language = src_language

        self.CFG_map = {
            "c": CFGGraph_c,
            "cpp": CFGGraph_cpp,
        }
        if self.src_language not in self.CFG_map:
            raise UnimplementedHookError(f"No CFG builder wired for language '{src_language}'")

        self.parser = ParserDriver(src_language, src_code).parser
        self.root_node = self.parser.root_node
        self.src_code = self.parser.src_code

        self.CFG = self.CFG_map[self.src_language](
            self.src_language,
            self.src_code,
            self.root_node,
            self.parser,
        )
        self.node_store = self.CFG.node_store
        self.graph = self.CFG.graph
        self.flowchart = postprocessor.to_flowchart(self.node_store)

        if output_file:
            postprocessor.write_flowchart(self.flowchart, output_file)
            logger.info(f"Flowchart written to {output_file}")
        if json_file:
            self.json = postprocessor.write_networkx_to_json(self.graph, json_file)
            logger.info(f"Node-link json written to {json_file}")
