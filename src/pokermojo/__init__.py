"""PokerMojo — which of two poker hands wins?"""

__version__ = "0.1.0"
