statement_types = {
    "branch_statement": [
        "if_statement",
    ],
    # Only treated as definitions when they carry a body; `struct s;` stays a statement
    "definition_types": [
        "function_definition",
        "struct_specifier",
        "union_specifier",
        "enum_specifier",
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
    ],
    # Conditional compilation is transparent; the guard name and condition produce no node
    "preproc_blocks": [
        "preproc_if",
        "preproc_ifdef",
        "preproc_elif",
        "preproc_else",
    ],
    # Control constructs that are rendered as opaque statements
    "unsupported_statement": [
        "while_statement",
        "for_statement",
        "do_statement",
        "switch_statement",
    ],
    "ignored_types": [
        "comment",
    ],
}


def get_child_of_type(node, type_list):
    out = list(filter(lambda x: x.type in type_list, node.children))
    if len(out) > 0:
        return out[0]
    else:
        return None


def get_definition_body(node):
    return node.child_by_field_name("body")


def get_definition_header(node, src_code):
    """
    Source text of a definition up to its body, whitespace collapsed.

    `int\nmain (void)\n{ ... }` gives `int main (void)`, `struct point { ... }`
    gives `struct point`.
    """
    body = get_definition_body(node)
    end = body.start_byte if body is not None else node.end_byte
    header = src_code[node.start_byte:end].decode("utf-8")
    return " ".join(header.split())


def get_preproc_items(node):
    """Named children of a conditional-compilation block, without its guard name or condition."""
    guards = [node.child_by_field_name("name"), node.child_by_field_name("condition")]
    guard_keys = {(g.start_point, g.end_point, g.type) for g in guards if g is not None}
    return [
        child for child in node.named_children
        if (child.start_point, child.end_point, child.type) not in guard_keys
    ]
