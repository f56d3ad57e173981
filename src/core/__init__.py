"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the sleep gate
that are independent of upstream classifiers and sensor pipelines.
"""
