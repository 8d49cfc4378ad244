import os
import unittest
import warnings

from src.calculator.card.card import Card
from src.calculator.card.card_factory import CardFactory
from src.calculator.card.deck import Deck
from src.calculator.core.card_matcher import CardMatcher
from src.calculator.core.enums import Attribute


class TestDeck(unittest.TestCase):

    def setUp(self):
        project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            self.factory = CardFactory(os.path.join(project_root, "data", "cards.json"))

    def test_deck_keeps_order(self):
        cards = [Card("結城 莉玖"), Card("藍原 椿"), Card("桜井 春菜")]
        deck = Deck(*cards)

        self.assertEqual(len(deck), 3)
        self.assertEqual(list(deck), cards)
        self.assertIs(deck[1], cards[1])

    def test_deck_size_is_fixed(self):
        with self.assertRaises(ValueError):
            Deck(Card("結城 莉玖"), Card("藍原 椿"))
        with self.assertRaises(ValueError):
            Deck(*[Card("結城 莉玖")] * 4)

    def test_count_matching(self):
        deck = Deck(
            Card("結城 莉玖", Attribute.FIRE),
            Card("結城 莉玖", Attribute.AQUA),
            Card("桜井 春菜", Attribute.FIRE),
        )

        self.assertEqual(deck.count_matching(CardMatcher(character_names=["結城 莉玖"])), 2)
        self.assertEqual(deck.count_matching(CardMatcher(attribute=Attribute.LEAF)), 0)
        self.assertEqual(deck.count_matching(CardMatcher()), 3)

    def test_from_card_ids(self):
        deck = Deck.from_card_ids(self.factory, [1, 2, 3], choukaika=True)

        self.assertIsNotNone(deck)
        self.assertEqual([card.card_id for card in deck], [1, 2, 3])
        self.assertTrue(all(card.choukaika for card in deck))

    def test_from_card_ids_with_missing_card(self):
        with self.assertWarns(UserWarning) as cm:
            deck = Deck.from_card_ids(self.factory, [1, 4001, 3])

        self.assertIsNone(deck)
        messages = [str(w.message) for w in cm.warnings]
        self.assertIn("Could not build deck: card ID 4001 is missing.", messages)

    def test_repr(self):
        deck = Deck.from_card_ids(self.factory, [2, 2, 2])
        self.assertTrue(repr(deck).startswith("--- Deck ---\nSlot 1:\n<Card id=2"))
        self.assertIn("Slot 3:", repr(deck))


if __name__ == "__main__":
    unittest.main(argv=["first-arg-is-ignored"], exit=False)
