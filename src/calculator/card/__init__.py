from .card_data import CardData
from .card_factory import CardFactory
from .card import Card
from .deck import Deck

__all__ = [
    "CardData",
    "CardFactory",
    "Card",
    "Deck",
]
