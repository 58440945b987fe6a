from avltree.tree import BalancedTree, EmptyTreeError, Node, OrderedTree
from avltree.generator import ascending_keys, random_keys, parse_keys

__all__ = [
    "BalancedTree",
    "EmptyTreeError",
    "Node",
    "OrderedTree",
    "ascending_keys",
    "random_keys",
    "parse_keys",
]
