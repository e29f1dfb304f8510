"""Grid snake: game state, pygame display and the host loop."""
