"""
Infrastructure Layer

Reusable SQL text services that support data-access code without
containing any driver business rules themselves.

Components:
- sql.core: tokenizer, escaping helpers, result table, status values
- sql.dialects: SQLite quoting and column affinity mapping
- sql.operations: engine wrappers and column-list splitting

Usage:
    from gpkg_sqlkit.infrastructure.sql import tokenize, escape_literal
"""

__all__: list[str] = []
