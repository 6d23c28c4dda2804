"""Poker Ranker - five-card poker hand classification.

A small library for parsing two-character card tokens and classifying
five-card hands, with a command line front end and an HTTP API.
"""

__version__ = "0.1.0"
__author__ = "Poker Ranker Team"

from poker_ranker.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
