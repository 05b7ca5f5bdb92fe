"""Layered user service.

A controller -> service -> repository -> domain CRUD stack for users. The
layering is enforced by the architecture tests under ``tests/architecture``
and by the import-linter contracts in ``pyproject.toml``.
"""

__version__ = "0.1.0"
