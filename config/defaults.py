"""Default configuration constants for the Hotel Room Reservation Planner."""

import os

# Hotel structure
FLOORS = 10
ROOMS_PER_FLOOR = (10, 10, 10, 10, 10, 10, 10, 10, 10, 7)  # Floor 10 has only 7 rooms
ROOM_NUMBER_FLOOR_MULTIPLIER = 100  # 3rd floor, 4th room -> 304; 10th floor -> 1001

# Booking policy
MAX_ROOMS_PER_BOOKING = 5

# Travel time (minutes)
VERTICAL_TRAVEL_COST = 2    # per floor, via stairs/lift
HORIZONTAL_TRAVEL_COST = 1  # per room, same floor only

# Exhaustive search guard: combinations are enumerated only when the request
# is small or few rooms are left. C(97, 5) is ~64 million.
EXHAUSTIVE_MAX_REQUEST = 3
EXHAUSTIVE_MAX_AVAILABLE = 20

# Random occupancy generator
RANDOM_OCCUPANCY_PROBABILITY = 0.3

# Strategy labels
STRATEGY_SAME_FLOOR = "same_floor"
STRATEGY_EXHAUSTIVE = "exhaustive"
STRATEGY_GREEDY = "greedy"

STRATEGY_LABELS = {
    STRATEGY_SAME_FLOOR: "Same-floor search",
    STRATEGY_EXHAUSTIVE: "Exhaustive cross-floor search",
    STRATEGY_GREEDY: "Greedy fallback",
}

# Status colours used by the layout grid and legend
STATUS_COLORS = {
    "available": "#8FD19E",
    "occupied": "#F08A8A",
    "selected": "#7DB3F0",
}

# Logging
LOG_LEVEL = os.environ.get("HOTEL_LOG_LEVEL", "INFO")
