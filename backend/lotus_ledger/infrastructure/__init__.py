"""Infrastructure Layer: MongoDB client, game store adapter, logging setup.

Invariants:
    - Infrastructure never imports from api/
    - All driver exceptions mapped to core/errors.py before leaving this layer
"""
