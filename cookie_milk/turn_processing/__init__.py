"""Move processing helpers.

This package centralizes validation so every write to the session goes through
the same checks in the same order.
"""
