"""In-memory algorithms engine: heaps, AVL trees, graphs and hash tables."""

from .adjacency_graph import Graph
from .avl_tree import AVLNode, AVLTree
from .binary_heap import BinaryHeap
from .hash_table import HashNode, HashTable
from .linked_primitives import ListNode, MinHeap, PQEntry, Queue, Stack

__all__ = [
    "AVLNode",
    "AVLTree",
    "BinaryHeap",
    "Graph",
    "HashNode",
    "HashTable",
    "ListNode",
    "MinHeap",
    "PQEntry",
    "Queue",
    "Stack",
]
