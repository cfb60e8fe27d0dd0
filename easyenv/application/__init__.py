"""
Application layer: use case orchestration over the boundary adapters.
"""
