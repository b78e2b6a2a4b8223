from cProfile import run
from avltree import AVLTree

tree = AVLTree()

run(
    "[tree.insert(i) for i in range(0, 100000)]",
    filename="tmp/avltree.prof",
)
