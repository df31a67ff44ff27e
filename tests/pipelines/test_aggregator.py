"""Tests for the calendar aggregator."""

import logging
from datetime import datetime

import pytz

from src.ingestion.generators import get_generator
from src.pipelines.calendar.aggregator import aggregate
from src.pipelines.calendar.schema import GeneratorResult

NOW = datetime(2025, 2, 10, 12, 5, tzinfo=pytz.UTC)


class StaticGenerator:
    """Generator double returning fixed events."""

    def __init__(self, source, events=(), error=None):
        self.SOURCE_NAME = source
        self.events = events
        self.error = error
        self.references = []

    def run(self, reference):
        self.references.append(reference)
        if self.error is not None:
            return GeneratorResult.failure(self.SOURCE_NAME, self.error)
        return GeneratorResult.success(self.SOURCE_NAME, self.events)


class RaisingGenerator:
    SOURCE_NAME = "raising"

    def run(self, reference):
        raise RuntimeError("unexpected")


class TestAggregate:
    """Test merging of generator output."""

    def test_sorted_by_date_then_time(self, event_factory, reference):
        late = event_factory(date="2025-02-12", time="15:00", title="Late")
        early = event_factory(date="2025-02-12", time="03:30", title="Early")
        first_day = event_factory(date="2025-02-11", time="23:00", title="First")

        snapshot = aggregate(
            [StaticGenerator("a", [late, early]), StaticGenerator("b", [first_day])],
            reference,
            now=NOW,
        )
        assert [e.title for e in snapshot.events] == ["First", "Early", "Late"]

    def test_ties_keep_registry_then_emission_order(self, event_factory, reference):
        a1 = event_factory(title="A1", source="a")
        a2 = event_factory(title="A2", source="a")
        b1 = event_factory(title="B1", source="b")

        snapshot = aggregate(
            [StaticGenerator("b", [b1]), StaticGenerator("a", [a1, a2])],
            reference,
            now=NOW,
            max_workers=2,
        )
        assert [e.title for e in snapshot.events] == ["B1", "A1", "A2"]

    def test_cross_source_duplicates_kept(self, event_factory, reference):
        event = event_factory()
        snapshot = aggregate(
            [StaticGenerator("a", [event]), StaticGenerator("b", [event])],
            reference,
            now=NOW,
        )
        assert len(snapshot.events) == 2

    def test_snapshot_metadata(self, sample_events, reference):
        snapshot = aggregate([StaticGenerator("bls", sample_events)], reference, now=NOW)

        assert snapshot.last_updated == NOW.isoformat()
        assert snapshot.date_range.start == "2025-02-07"
        assert snapshot.date_range.end == "2025-02-20"
        assert snapshot.sources == ("bls",)
        assert snapshot.data_included is False

    def test_reference_passed_to_every_generator(self, reference):
        generators = [StaticGenerator("a"), StaticGenerator("b")]
        aggregate(generators, reference, now=NOW)
        assert all(g.references == [reference] for g in generators)


class TestFailureIsolation:
    """A failing generator never aborts the run."""

    def test_failed_result_contributes_nothing(self, event_factory, reference, caplog):
        good = StaticGenerator("good", [event_factory()])
        bad = StaticGenerator("bad", error="ConnectionError: down")

        with caplog.at_level(logging.WARNING):
            snapshot = aggregate([bad, good], reference, now=NOW)

        assert len(snapshot.events) == 1
        assert snapshot.sources == ("bad", "good")
        assert "Generator 'bad' failed: ConnectionError: down" in caplog.text
        assert "Failed generators: bad" in caplog.text

    def test_raising_generator_isolated(self, event_factory, reference):
        good = StaticGenerator("good", [event_factory()])
        snapshot = aggregate([RaisingGenerator(), good], reference, now=NOW)
        assert [e.source for e in snapshot.events] == ["bls"]

    def test_unexpected_result_type_isolated(self, reference):
        class ListGenerator:
            SOURCE_NAME = "list"

            def run(self, reference):
                return []

        snapshot = aggregate([ListGenerator()], reference, now=NOW)
        assert snapshot.events == ()

    def test_all_failed_gives_empty_snapshot_dated_now(self, reference):
        snapshot = aggregate([RaisingGenerator()], reference, now=NOW)
        assert snapshot.events == ()
        assert snapshot.date_range.start == snapshot.date_range.end == "2025-02-10"

    def test_no_generators(self, reference):
        snapshot = aggregate([], reference, now=NOW)
        assert snapshot.events == ()
        assert snapshot.sources == ()


class TestWithRealGenerators:
    """Aggregation over real generators."""

    def test_rba_and_bls(self, reference):
        snapshot = aggregate(
            [get_generator("rba"), get_generator("bls")], reference, now=NOW
        )
        keys = [(e.date, e.time) for e in snapshot.events]
        assert keys == sorted(keys)
        assert {e.source for e in snapshot.events} >= {"rba", "abs", "bls"}
        rba_decision = next(e for e in snapshot.events if e.title == "RBA Interest Rate Decision")
        assert (rba_decision.date, rba_decision.time) == ("2025-02-18", "03:30")
