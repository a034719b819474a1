"""Binary tree nodes with AVL rotations, tree printers, a chained hash set, a timer and demos."""

__version__ = "0.1.0"