"""
play_match.py — Play one Airline Seats match
============================================

Plays a full match with seeded random policies and prints the final
standings. Configure the match with a .env file or environment:

    AIRLINE_SEATS_PLAYERS=3
    AIRLINE_SEATS_SEED=1234

    python play_match.py

The script will:
  1. Load the game configuration
  2. Play every phase until the match is terminal
  3. Pause and resume the match halfway through
  4. Print each player's accounts
"""

import logging
import random

from airline_seats import AirlineSeatsGame, load_config, setup_logging

# ── Setup logging (so you can see what's happening) ──
setup_logging(log_file_path="logs/airline_seats.jsonl", level=logging.INFO)

# ── Create the game ──
config = load_config()
game = AirlineSeatsGame(config)
policy = random.Random(config.seed)

state = game.new_initial_state()
while not state.is_terminal():
    if state.round == 5 and state.current_player() == 0:
        # Pause and resume from the text record
        state = game.deserialize_state(state.serialize())
    if state.is_chance_node():
        state.apply_action(0)
    else:
        state.apply_action(policy.choice(state.legal_actions()))

# ── Final standings ──
result = state.result()
for player in result.players:
    print(
        f"Player {player.player}: bought={player.bought_seats} "
        f"sold={player.seats_sold} late={player.late_units} pnl={player.pnl:.0f}"
    )
print("Draw" if result.is_draw else f"Winner: player {result.winner}")
