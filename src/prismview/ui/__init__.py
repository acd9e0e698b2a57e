"""User interfaces built on top of the prismview core."""
