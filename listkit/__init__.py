"""Array-backed, singly, circular and doubly linked list containers with self-checks."""

__version__ = "0.1.0"
__all__ = ["arraylist", "singly", "circular", "doubly", "selftest"]