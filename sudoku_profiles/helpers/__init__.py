"""Helpers: domain-aware convenience.

Contents should:
- Know about user active games or how they are stored
- Wrap multiple steps into a higher-level action
- Be opinionated about data shape (filters, documents, log sinks)
"""
