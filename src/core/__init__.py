"""
Core domain models and integer/digit primitives for Boolean term minimization.

This module contains the foundational building blocks that are independent
of any minimization pipeline built on top of them.
"""
