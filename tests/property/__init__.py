# tests/property/__init__.py
"""Property-based tests for mockwire.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of.

Test categories:
- expectation/: Part merging invariants, response cycling under concurrency
"""
