"""Domain models and static tables.

Pure data: no I/O, no CLI, no printing.
"""
