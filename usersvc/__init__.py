# (c) Copyright Datacraft, 2026
"""Users CRUD service."""
