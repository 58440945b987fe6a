
from avltree import BalancedTree, ascending_keys


def show_found(node):
    if node is not None:
        print(node.get_key())
    else:
        print("not found such element")


def run_demo():
    print("--- AVL tree demo ---")
    tree = BalancedTree()
    for key in ascending_keys(10):
        tree.insert(key)

    print(f"The height of the tree: {tree.height()}")
    print("preOrder: " + " ".join(str(k) for k in tree.pre_order()))
    print("inOrder: " + " ".join(str(k) for k in tree.in_order()))
    print("postOrder: " + " ".join(str(k) for k in tree.post_order()))

    print("delete element: 10")
    tree.remove(10)

    show_found(tree.search_iterative(10))
    show_found(tree.search_iterative(7))

    print("Structure:")
    for line in tree.describe():
        print(f"  {line}")

    tree.destroy()
    print("destroy tree")


if __name__ == "__main__":
    run_demo()
