"""Tests for outcome reporting."""

import logging

import pytest
from coup_resolver.actions import ActionFactory
from coup_resolver.player import CoupPlayer
from coup_resolver.reporter import LoggingObserver, OutcomeReporter, format_records
from coup_resolver.types import ActionType, CounterType, EntryType


@pytest.fixture
def players():
    return CoupPlayer("Elder"), CoupPlayer("Highlander")


class TestOutcomeReporter:
    """Test records name dispatcher, kind, outcome and target."""

    def test_targeted_action(self, players):
        elder, high = players
        record = OutcomeReporter.describe(ActionFactory.create_action(ActionType.STEAL, elder, high), True)

        assert record.entry_type == EntryType.ACTION
        assert record.kind == "Steal"
        assert record.dispatcher == "Elder"
        assert record.target == "Highlander"
        assert record.success
        assert record.claimed == ("Captain",)
        assert record.message == "Elder successfully performed Steal on Highlander"

    def test_untargeted_failure(self, players):
        elder, _ = players
        record = OutcomeReporter.describe(ActionFactory.create_action(ActionType.INCOME, elder), False)

        assert record.target is None
        assert record.claimed == ()
        assert record.message == "Elder failed to perform Income"

    def test_challenge(self, players):
        elder, high = players
        tax = ActionFactory.create_action(ActionType.TAX, high)
        challenge = ActionFactory.create_challenge(elder, high)

        record = OutcomeReporter.describe(challenge, False, tax)

        assert record.target == "Highlander"
        assert record.message == "Elder failed to challenge Highlander's Tax"

    def test_counter(self, players):
        elder, high = players
        steal = ActionFactory.create_action(ActionType.STEAL, elder, high)
        counter = ActionFactory.create_counter(CounterType.COUNTER_STEAL, high)

        record = OutcomeReporter.describe(counter, True, steal)

        assert record.target == "Elder"
        assert record.claimed == ("Ambassador", "Captain")
        assert record.message == "Highlander successfully blocked Elder's Steal (Counter Steal)"

    def test_gated_entry_required(self, players):
        elder, high = players
        with pytest.raises(ValueError):
            OutcomeReporter.describe(ActionFactory.create_challenge(elder, high), True)

    def test_describe_is_deterministic(self, players):
        elder, high = players
        steal = ActionFactory.create_action(ActionType.STEAL, elder, high)

        assert OutcomeReporter.describe(steal, True) == OutcomeReporter.describe(steal, True)
        assert elder.coins == 0

    def test_to_dict(self, players):
        elder, _ = players
        record = OutcomeReporter.describe(ActionFactory.create_action(ActionType.TAX, elder), True)

        assert record.to_dict() == {
            "entry_type": "Action",
            "kind": "Tax",
            "dispatcher": "Elder",
            "target": None,
            "success": True,
            "claimed": ["Duke"],
            "message": "Elder successfully performed Tax",
        }

    def test_format_records(self, players):
        elder, high = players
        records = [
            OutcomeReporter.describe(ActionFactory.create_action(ActionType.INCOME, elder), True),
            OutcomeReporter.describe(ActionFactory.create_action(ActionType.INCOME, high), False),
        ]

        assert format_records(records) == (
            "Elder successfully performed Income\nHighlander failed to perform Income"
        )


class TestLoggingObserver:
    """Test records reach the logging system."""

    def test_logs_records(self, players, caplog):
        elder, _ = players
        observer = LoggingObserver()
        record = OutcomeReporter.describe(ActionFactory.create_action(ActionType.TAX, elder), True)

        with caplog.at_level(logging.INFO, logger="coup_resolver.reporter"):
            observer.on_step_resolved(record)
            observer.on_round_aborted("nothing beneath")
            observer.on_player_eliminated("Highlander")

        assert "Elder successfully performed Tax" in caplog.text
        assert "Resolution round aborted: nothing beneath" in caplog.text
        assert "Highlander was eliminated" in caplog.text
        assert caplog.records[1].args == ("nothing beneath",)
        assert caplog.records[0].resolution["kind"] == "Tax"
