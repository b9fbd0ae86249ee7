"""Game constants for Dutch."""

# Deck
SUIT_SIZE = 13
DECK_SIZE = 52

# Card ranks with special effects
ACE = 1
JACK = 11
QUEEN = 12
KING = 13

# Table
DEFAULT_HAND_SIZE = 4
DISCARD_SEED_COUNT = 1

# Scoring (actual logic in engine/scoring.py)
QUEEN_POINTS = 10
BLACK_KING_POINTS = 13
RED_KING_POINTS = 0
DUTCH_PENALTY = 10
GAME_OVER_SCORE = 100
