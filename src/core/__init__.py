"""
Core node model and arbitrary-precision math primitives.

This module contains the foundational building blocks that are independent
of external collaborators (tokenizer, parser, evaluator, UI).
"""
