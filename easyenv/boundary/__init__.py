"""
Boundary layer: adapters for the SQLite backend and environment files.
"""
