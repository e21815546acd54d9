"""Plurality and ranked-choice election counting."""
