"""
Core mathematical primitives and domain checks.

Contains the precondition checker, the exact combinatorics engine and the
small formula libraries built directly on them. Nothing here performs I/O.
"""
