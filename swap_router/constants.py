"""Engine-wide constants.

Fees and price impact are expressed in basis points of BPS_DENOMINATOR.
"""

# 1 bps = 0.01%
BPS_DENOMINATOR = 10_000

# Fee bounds for a pool (0 = free, 10000 = the pool keeps the whole input)
MIN_FEE_BPS = 0
MAX_FEE_BPS = BPS_DENOMINATOR

# Typical constant-product fee tier (0.3%)
DEFAULT_FEE_BPS = 30

# Search bounds; enumeration is exponential in hop count
DEFAULT_MAX_HOPS = 3
DEFAULT_MAX_PATHS = 64

# Upper bound on pools accepted into one HTTP snapshot
DEFAULT_MAX_POOLS = 10_000
