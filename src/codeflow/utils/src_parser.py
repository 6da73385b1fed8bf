def traverse_tree(tree):
    """Pre-order walk over every node of a tree-sitter tree."""
    cursor = tree.walk()

    reached_root = False
    while not reached_root:
        yield cursor.node

        if cursor.goto_first_child():
            continue

        if cursor.goto_next_sibling():
            continue

        retracing = True
        while retracing:
            if not cursor.goto_parent():
                retracing = False
                reached_root = True

            if cursor.goto_next_sibling():
                retracing = False


def find_error_node(tree):
    """Return the first ERROR or missing node in source order, or None for a clean tree."""
    if not tree.root_node.has_error:
        return None
    for node in traverse_tree(tree):
        if node.type == "ERROR" or node.is_missing:
            return node
    return tree.root_node
