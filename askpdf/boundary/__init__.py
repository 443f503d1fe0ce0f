"""
Boundary layer for external system integrations.

Key-value store, SQL persistence, vector index and chat model adapters.
"""
