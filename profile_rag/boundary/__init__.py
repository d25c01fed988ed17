"""
Boundary layer for external system integrations.

Handles all interactions with external systems (embedding provider, snapshot
storage, source document files).
"""
