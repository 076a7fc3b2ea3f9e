"""Tests for InMemoryCatalog (insertion and copy-on-read snapshots)."""

from app.domain.entities import Origin, Source
from app.infrastructure.catalog import InMemoryCatalog


class TestInsertMetric:
    def test_creates_origin_and_source(self) -> None:
        catalog = InMemoryCatalog()
        metric = catalog.insert_metric("collectd", "web01", "cpu.user")
        assert metric.source == "web01"
        assert metric.original_name == "cpu.user"
        [origin] = catalog.origins()
        assert origin.name == "collectd"
        assert origin.sources["web01"].origin == "collectd"
        assert list(origin.sources["web01"].metrics) == ["cpu.user"]

    def test_insert_is_idempotent(self) -> None:
        catalog = InMemoryCatalog()
        first = catalog.insert_metric("o", "s", "m")
        second = catalog.insert_metric("o", "s", "m")
        assert first is second
        assert len(catalog.origins()[0].sources["s"].metrics) == 1


class TestSnapshots:
    def test_snapshot_not_affected_by_later_writes(self, catalog) -> None:
        snapshot = catalog.origins()
        catalog.insert_metric("collectd", "web01.example.net", "mem.free")
        catalog.insert_metric("statsd", "api01", "requests")
        assert [o.name for o in snapshot] == ["collectd", "graphite"]
        assert "mem.free" not in snapshot[0].sources["web01.example.net"].metrics

    def test_mutating_snapshot_does_not_touch_store(self, catalog) -> None:
        snapshot = catalog.origins()
        snapshot[0].sources.clear()
        assert len(catalog.origins()[0].sources) == 2

    def test_replace_origin(self, catalog) -> None:
        catalog.replace_origin(
            Origin(name="graphite", sources={"x": Source(name="x", origin="graphite")})
        )
        origins = {o.name: o for o in catalog.origins()}
        assert list(origins["graphite"].sources) == ["x"]
        assert [o.name for o in catalog.origins()] == ["collectd", "graphite"]
