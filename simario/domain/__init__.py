"""Domain layer.

Pure dictionary logic: entities and services that perform no I/O.
"""
