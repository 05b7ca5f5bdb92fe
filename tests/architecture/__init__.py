"""Architecture conformance tests.

These tests assert the layering of ``layered_users``: which layers may import
which, the naming of classes in each layer, and that the top-level packages
are free of import cycles.
"""
