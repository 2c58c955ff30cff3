"""
gpkg-sqlkit - SQL text utilities for SQLite/GeoPackage data access.

Provides SQL tokenizing, literal/identifier escaping and a tabular
result accessor, plus thin wrappers that run statements through
SQLAlchemy and report failures as status values.
"""

__version__ = "0.1.0"
