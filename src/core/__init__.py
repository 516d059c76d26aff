"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of the presentation shell (form rendering, widgets, etc.).
"""
