"""Lotus Ledger: score ledger service for four-player games.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "0.3.0"
