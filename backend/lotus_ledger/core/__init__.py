"""Core Layer: domain types, error taxonomy and boundary protocols.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - No IO, no driver imports beyond identifier types
"""
