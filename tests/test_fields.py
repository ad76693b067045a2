"""Tests de extracción de valores numéricos desde los settings de un índice."""

import pytest

from conftest import index_entry
from index_settings_exporter.fields import (
    DEFAULT_NUMBER_OF_REPLICAS,
    DEFAULT_TOTAL_FIELDS_LIMIT,
    INDEX_SETTINGS_METRICS,
    creation_timestamp_seconds,
    is_read_only,
    number_of_replicas,
    total_fields_limit,
)


def test_total_fields_limit_parsed():
    assert total_fields_limit(index_entry(limit="2000")) == 2000.0


@pytest.mark.parametrize("entry", [index_entry(limit="not-a-number"), index_entry(limit="1_000_000"),
                                   index_entry(limit=" 2000 "), index_entry(), {}, None, {"settings": "x"}])
def test_total_fields_limit_defaults(entry):
    assert total_fields_limit(entry) == 1000.0


def test_replicas_parsed():
    assert number_of_replicas(index_entry(replicas="3")) == 3.0


def test_replicas_default_is_independent_of_total_fields():
    assert number_of_replicas(index_entry(replicas="many")) == float(DEFAULT_NUMBER_OF_REPLICAS)
    assert DEFAULT_NUMBER_OF_REPLICAS != DEFAULT_TOTAL_FIELDS_LIMIT


def test_creation_timestamp_converted_to_seconds():
    assert creation_timestamp_seconds(index_entry(creation_date="1700000000000")) == 1700000000.0


@pytest.mark.parametrize("entry", [index_entry(creation_date="yesterday"), index_entry()])
def test_creation_timestamp_defaults_to_zero(entry):
    assert creation_timestamp_seconds(entry) == 0.0


def test_fields_default_independently():
    entry = index_entry(limit="bogus", replicas="2", creation_date="1700000000000")

    assert total_fields_limit(entry) == 1000.0
    assert number_of_replicas(entry) == 2.0
    assert creation_timestamp_seconds(entry) == 1700000000.0


def test_non_string_values_are_tolerated():
    entry = {"settings": {"index": {"number_of_replicas": 2, "mapping": {"total_fields": {"limit": True}},
                                    "creation_date": {"ms": 1}}}}

    assert number_of_replicas(entry) == 2.0
    assert total_fields_limit(entry) == 1000.0
    assert creation_timestamp_seconds(entry) == 0.0


@pytest.mark.parametrize("flag, expected", [("true", True), ("false", False), ("TRUE", False), ("1", False), (None, False)])
def test_read_only_requires_exact_true(flag, expected):
    assert is_read_only(index_entry(read_only=flag)) is expected


def test_metric_table_covers_three_fields():
    assert [m.name for m in INDEX_SETTINGS_METRICS] == ["total_fields", "replicas", "creation_timestamp_seconds"]
