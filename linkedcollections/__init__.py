"""Doubly linked list and deque containers, with student, grade and person records."""

__version__ = "0.1.0"
__all__ = ["deque", "linked_list", "records"]