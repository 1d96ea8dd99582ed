"""
Core digit arithmetic, domain models, contracts and error taxonomy.

This module contains the foundational building blocks that are independent
of any presentation layer.
"""
