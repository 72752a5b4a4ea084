# Area: Core
"""
airline_seats._core.constants — Fixed economics of the game
===========================================================

Every number that shapes the market lives here so that the codec,
demand model, and scoring engine agree on the same values.
"""

# Match length
MAX_ROUNDS = 10
INITIAL_ROUND = 0

# Players
MIN_PLAYERS = 2
MAX_PLAYERS = 4
DEFAULT_PLAYERS = 2

# Action space (0-based in every phase)
NUM_BUY_ACTIONS = 5
NUM_PRICE_ACTIONS = 5
NUM_DISTINCT_ACTIONS = 5
CHANCE_ACTION = 0
SEAT_LOT_SIZE = 5             # action i buys i * 5 seats
BASE_PRICE = 50               # action j sets price 50 + j * 5
PRICE_STEP = 5

# Demand model
DEMAND_BASELINE = 36.0        # C0
PRICE_EXPONENT = 50           # k, applied as price ** -k
DEMAND_NOISE_SPREAD = 20      # R, in percent (+/- R/2 %)
C1_LOW = -0.24                # c11
C1_HIGH = -0.293              # c12

# Accounting
INITIAL_PURCHASE_PRICE = 50
LATE_PURCHASE_PRICE = 80

# Utility bounds reported by the game definition
MIN_UTILITY = -1000.0
MAX_UTILITY = 5000.0
