"""Tests for the example election generator script."""

import importlib.util
from pathlib import Path

from faker import Faker

from election.loader import load_election

SCRIPT = Path(__file__).parent.parent / "scripts" / "generate_election.py"


def load_script():
    spec = importlib.util.spec_from_file_location("generate_election", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestGenerateElection:
    def setup_method(self):
        self.script = load_script()

    def test_generate_names_distinct(self):
        fake = Faker()
        Faker.seed(7)
        names = self.script.generate_names(50, fake)
        assert len(names) == 50
        assert len(set(names)) == 50

    def test_payload_shape(self):
        payload = self.script.generate_payload(4, 30, 3, seed=1)
        assert len(payload["candidates"]) == 4
        assert len(payload["ballots"]) == 30
        assert [b["voter"]["id"] for b in payload["ballots"]] == list(range(1, 31))
        for ballot in payload["ballots"]:
            assert [v["rank"] for v in ballot["votes"]] == [1, 2, 3]
            assert len({v["candidate"] for v in ballot["votes"]}) == 3

    def test_reproducible(self):
        first = self.script.generate_payload(3, 10, 3, seed=5)
        second = self.script.generate_payload(3, 10, 3, seed=5)
        assert first == second

    def test_payload_counts(self):
        payload = self.script.generate_payload(5, 40, 5, seed=2)
        election = load_election(payload, "ranked_choice")
        election.count_votes()
        assert election.winner in election.candidates
