import warnings
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from src.calculator.card.card import Card
from src.calculator.card.card_factory import CardFactory
from src.calculator.core.card_matcher import CardMatcher


class Deck:
    """An ordered, fixed-size set of cards used in a battle."""

    DECK_SIZE = 3

    def __init__(self, *cards: Card):
        if len(cards) != self.DECK_SIZE:
            raise ValueError(
                f"A deck must hold exactly {self.DECK_SIZE} cards, got {len(cards)}."
            )
        self._cards: Tuple[Card, ...] = tuple(cards)

    @classmethod
    def from_card_ids(
        cls, card_factory: CardFactory, card_ids: Iterable[int], **kwargs: Any
    ) -> Optional["Deck"]:
        """
        Creates every card with the factory and builds a deck from them.

        Args:
            card_factory: The factory used to create the cards.
            card_ids: The static IDs of the cards, in deck order.
            **kwargs: Configuration passed to CardFactory.create_card.

        Returns:
            The deck, or None if a card could not be created.
        """
        cards: List[Card] = []
        for card_id in card_ids:
            card = card_factory.create_card(card_id, **kwargs)
            if not card:
                warnings.warn(f"Could not build deck: card ID {card_id} is missing.")
                return None
            cards.append(card)
        return cls(*cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    def count_matching(self, matcher: CardMatcher) -> int:
        """Returns the number of cards in the deck satisfying the matcher."""
        return sum(1 for card in self._cards if matcher.match(card))

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __repr__(self) -> str:
        card_lines = [
            f"Slot {slot}:\n{card!r}" for slot, card in enumerate(self._cards, start=1)
        ]
        return "--- Deck ---\n" + "\n\n".join(card_lines)
