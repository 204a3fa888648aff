"""Core Layer — pure payload construction, no IO, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Time and randomness enter only through clock.py, identifiers.py and experiment.burn_cpu
"""
