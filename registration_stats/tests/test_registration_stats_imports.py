import pytest


@pytest.mark.parametrize(
    "symbol_name",
    [
        "AggregationConfig",
        "InMemoryRecordSource",
        "ParticipantRecord",
        "RecordSource",
        "RecordSourceError",
        "Statistics",
        "Summary",
        "YamlRecordSource",
        "compute",
    ],
)
def test_import_symbol(symbol_name):
    """Test that each key symbol can be imported from registration_stats."""
    module = __import__("registration_stats", fromlist=[symbol_name])
    symbol = getattr(module, symbol_name, None)
    assert symbol is not None, f"{symbol_name} could not be imported"


def test_import_failure():
    """Test that importing a non-existent symbol raises ImportError or AttributeError."""
    with pytest.raises((ImportError, AttributeError)):
        from registration_stats import NotARealClass
