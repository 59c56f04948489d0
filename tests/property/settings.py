"""Standardized Hypothesis settings profiles for property tests.

Usage:
    from tests.property.settings import STANDARD_SETTINGS

    @given(count=st.integers(min_value=0))
    @STANDARD_SETTINGS
    def test_something(count):
        ...

Tiers:
- STANDARD_SETTINGS: 100 examples - Regular property tests
- SLOW_SETTINGS: 50 examples - Thread-pool tests
- QUICK_SETTINGS: 20 examples - Fast validation tests (simple rejection)
"""

from hypothesis import settings

STANDARD_SETTINGS = settings(max_examples=100)

# Each example spins up a thread pool
SLOW_SETTINGS = settings(max_examples=50)

QUICK_SETTINGS = settings(max_examples=20)
