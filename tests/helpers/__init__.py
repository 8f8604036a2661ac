"""Test helpers module for shared test utilities.

- factories: shorthand constructors for BigDecimal values
"""

from tests.helpers.factories import d, pair
