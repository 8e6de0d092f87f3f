"""Domain layer for taskboard.

Pure models and rules; no I/O.

Subpackages:
    shared - Result values and the error taxonomy
    task - Task lifecycle, search and aggregation
"""
