statement_types = {
    "branch_statement": [
        "if_statement",
    ],
    "definition_types": [
        "function_definition",
        "class_specifier",
        "struct_specifier",
        "union_specifier",
        "enum_specifier",
        "namespace_definition",
    ],
    "block_types": [
        "translation_unit",
        "compound_statement",
        "else_clause",
        "field_declaration_list",
        "enumerator_list",
        "declaration_list",
        "linkage_specification",
        "preproc_if",
        "preproc_ifdef",
        "preproc_elif",
        "preproc_else",
        "template_declaration",
    ],
    # Conditional compilation is transparent; the guard name and condition produce no node
    "preproc_blocks": [
        "preproc_if",
        "preproc_ifdef",
        "preproc_elif",
        "preproc_else",
    ],
    "unsupported_statement": [
        "while_statement",
        "for_statement",
        "for_range_loop",
        "do_statement",
        "switch_statement",
        "try_statement",
    ],
    "ignored_types": [
        "comment",
        "access_specifier",
        "template_parameter_list",
    ],
}
