"""
Tests for Statistics convenience wrapper class.
"""
from __future__ import annotations

import pytest

from registration_stats.record_source import InMemoryRecordSource, RecordSourceError, YamlRecordSource
from registration_stats.statistics import AggregationConfig, Statistics


class TestStatistics:
    """Tests for Statistics wrapper class."""

    def test_init_with_records(self, raw_records):
        """Test that records given at construction are computed immediately."""
        stats = Statistics(records=raw_records)

        assert stats.results is not None
        assert stats.results.total_records == 4

    def test_init_with_record_source_is_lazy(self, raw_records):
        """Test that a record source is only read on refresh."""
        stats = Statistics(record_source=InMemoryRecordSource(raw_records))

        assert stats.results is None

        summary = stats.refresh()

        assert summary is stats.results
        assert summary.total_records == 4

    def test_refresh_takes_new_snapshot(self):
        """Test that refresh picks up changes in the source."""
        source = InMemoryRecordSource([{'passType': 'General'}])
        stats = Statistics(record_source=source)

        first = stats.refresh()
        source.records.append({'passType': 'Hackathon'})
        second = stats.refresh()

        assert first.total_records == 1
        assert second.total_records == 2
        assert second.pass_type_counts == {'General': 1, 'Hackathon': 1, 'Signature': 0}

    def test_refresh_without_source(self):
        """Test that refresh without a source is a usage error."""
        stats = Statistics()

        with pytest.raises(ValueError):
            stats.refresh()

    def test_source_errors_propagate(self, tmp_path):
        """Test that record source failures reach the caller unchanged."""
        stats = Statistics(record_source=YamlRecordSource(tmp_path / "missing.yaml"))

        with pytest.raises(RecordSourceError):
            stats.refresh()
        assert stats.results is None

    def test_analyze_method(self, scenario_records):
        """Test analyze method with new data."""
        stats = Statistics()

        results = stats.analyze(scenario_records)

        assert results.total_records == 3
        assert stats.results is results

    def test_config_dict(self, raw_records):
        """Test initialization with config dictionary."""
        stats = Statistics(records=raw_records, config_dict={'topCollegeLimit': 1, 'collectors': {'attendance': False}})

        assert stats.results.college_distribution == (('MIT', 2),)
        assert stats.results.total_event_attendances == 6

    def test_config_file(self, tmp_path, raw_records):
        """Test initialization with a YAML config file."""
        path = tmp_path / "config.yaml"
        path.write_text("statistics:\n  knownPassTypes: [Signature]\n", encoding="utf-8")

        stats = Statistics(records=raw_records, config_file=path)

        assert stats.results.pass_type_counts == {'Signature': 1}

    def test_explicit_config(self, raw_records):
        """Test initialization with a ready-made config."""
        stats = Statistics(records=raw_records, config=AggregationConfig(event_attendance_fields=('event1',)))

        assert stats.results.total_event_attendances == 2

    def test_to_dict(self, raw_records):
        """Test to_dict export."""
        stats = Statistics(records=raw_records)

        data = stats.to_dict()

        assert data['totalRecords'] == 4
        assert data['distinctCollegeCount'] == 2

    def test_to_dict_before_computation(self):
        """Test to_dict with no results yet."""
        assert Statistics().to_dict() == {}

    def test_yaml_snapshot_end_to_end(self, tmp_path):
        """Test a full run from a YAML snapshot."""
        path = tmp_path / "registrations.yaml"
        path.write_text(
            "participants:\n"
            "  - {paymentStatus: Successful, passType: General, college: X, event1: true}\n"
            "  - {paymentStatus: Failed, passType: General, college: X}\n"
            "  - {paymentStatus: Successful, passType: Hackathon, college: Y, event2: true}\n",
            encoding="utf-8",
        )

        summary = Statistics(record_source=YamlRecordSource(path)).refresh()

        assert summary.total_records == 3
        assert summary.successful_payments == 2
        assert summary.total_event_attendances == 2
        assert summary.college_distribution == (('X', 2), ('Y', 1))
        assert summary.dominant_pass_type == 'General'
