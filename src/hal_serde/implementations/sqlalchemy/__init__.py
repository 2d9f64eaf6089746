from .core import SQLAResourceAdapter, foreign_identity, is_alien_clause  # noqa: F401
