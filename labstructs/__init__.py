"""Queues, a service simulation, stacks, expression and AVL trees, linked lists, hash sets and graph cuts, with interactive console programs."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "expr_tree",
    "graph",
    "graph_cli",
    "hashing",
    "linked_list",
    "queue_cli",
    "queues",
    "search_cli",
    "simulation",
    "stack",
]