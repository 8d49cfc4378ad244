import logging
import os
import tempfile
import unittest
import warnings

from src.calculator.card.card_factory import CardFactory
from src.calculator.card.deck import Deck
from src.calculator.evaluation.deck_evaluator import DeckEvaluator
from src.calculator.evaluation.evaluation_config import EvaluationConfig
from src.calculator.evaluation.report import DeckReport


class TestEvaluationConfig(unittest.TestCase):

    def test_defaults(self):
        config = EvaluationConfig()

        self.assertFalse(config.enable_logging)
        self.assertEqual(config.log_level, logging.INFO)
        self.assertEqual(config.log_dir, "logs")

    def test_invalid_log_level(self):
        with self.assertRaises(ValueError):
            EvaluationConfig(log_level=15)

    def test_empty_log_dir(self):
        with self.assertRaises(ValueError):
            EvaluationConfig(log_dir="")


class TestDeckEvaluator(unittest.TestCase):

    def setUp(self):
        project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            self.factory = CardFactory(os.path.join(project_root, "data", "cards.json"))

        # Riku fusion (boss), Riku attack, Miu FIRE ATTACK boost
        self.deck = Deck.from_card_ids(self.factory, [1, 2, 3])

    def _totals(self, evaluations):
        return [e.total_percent for e in evaluations]

    def test_normal_phase(self):
        evaluations = DeckEvaluator(self.deck).evaluate(in_boss_phase=False)

        self.assertEqual([e.slot for e in evaluations], [1, 2, 3])
        self.assertEqual([e.self_percent for e in evaluations], [0, 15, 0])
        self.assertEqual([e.boost_percent for e in evaluations], [10, 10, 0])
        self.assertEqual(self._totals(evaluations), [10, 25, 0])

    def test_boss_phase_counts_matching_cards(self):
        evaluations = DeckEvaluator(self.deck).evaluate(in_boss_phase=True)

        # 7% per Riku card in the deck, two of them
        self.assertEqual(evaluations[0].self_percent, 14)
        self.assertEqual(self._totals(evaluations), [24, 25, 0])

    def test_choukaika_deck(self):
        deck = Deck.from_card_ids(self.factory, [1, 2, 3], choukaika=True)
        phases = DeckEvaluator(deck).evaluate_all_phases()

        self.assertEqual(self._totals(phases["normal"]), [15, 32, 0])
        self.assertEqual(self._totals(phases["boss"]), [33, 32, 0])

    def test_secondary_skills_are_evaluated(self):
        # Tsubaki AQUA boost with attack, Haruna guard, Koboshi boss attack
        deck = Deck.from_card_ids(self.factory, [4, 5, 6])
        phases = DeckEvaluator(deck).evaluate_all_phases()

        self.assertEqual(self._totals(phases["normal"]), [3, 3, 0])
        self.assertEqual(self._totals(phases["boss"]), [3, 3, 17])

    def test_logging_disabled_by_default(self):
        evaluator = DeckEvaluator(self.deck)

        self.assertGreater(evaluator.logger.level, logging.CRITICAL)
        self.assertTrue(
            all(isinstance(h, logging.NullHandler) for h in evaluator.logger.handlers)
        )

    def test_logging_to_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config = EvaluationConfig(enable_logging=True, log_dir=tmp_dir)
            evaluator = DeckEvaluator(self.deck, config)
            evaluator.evaluate(in_boss_phase=True)

            for handler in evaluator.logger.handlers:
                handler.close()
            evaluator.logger.handlers.clear()

            log_files = os.listdir(tmp_dir)
            self.assertEqual(len(log_files), 1)
            with open(os.path.join(tmp_dir, log_files[0]), encoding="utf-8") as f:
                content = f.read()

        self.assertIn(
            "Slot 1 ([SSR] 結城 莉玖) [boss]: self +14%, boost +10%, total +24%", content
        )

    def test_repr(self):
        self.assertEqual(
            repr(DeckEvaluator(self.deck)),
            "<DeckEvaluator(Cards=[[SSR] 結城 莉玖, [SR] 結城 莉玖, [SSR] 日向 美海])>",
        )


class TestDeckReport(unittest.TestCase):

    def setUp(self):
        project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            factory = CardFactory(os.path.join(project_root, "data", "cards.json"))
        self.report = DeckReport(DeckEvaluator(Deck.from_card_ids(factory, [1, 2, 3])))

    def test_to_dataframe(self):
        df = self.report.to_dataframe()

        self.assertEqual(list(df.index), [1, 2, 3])
        self.assertEqual(list(df.columns), DeckReport.COLUMNS[1:])
        self.assertEqual(df["Normal Total %"].tolist(), [10, 25, 0])
        self.assertEqual(df["Boss Total %"].tolist(), [24, 25, 0])
        self.assertEqual(df.loc[3, "Character"], "日向 美海")

    def test_save_csv(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = self.report.save_csv(os.path.join(tmp_dir, "reports", "deck.csv"))

            self.assertTrue(path.exists())
            with open(path, encoding="utf-8") as f:
                header = f.readline().strip()

        self.assertEqual(header, ",".join(DeckReport.COLUMNS))

    def test_str(self):
        self.assertIn("Boss Total %", str(self.report))


if __name__ == "__main__":
    unittest.main(argv=["first-arg-is-ignored"], exit=False)
