"""
record_source.py - snapshot providers for registration records.

A record source hands the statistics engine the full current set of
registration records. The engine treats it as a black box: it does not
paginate, retry or cache on the source's behalf.

Module: registration_stats.record_source
"""

__all__ = ['RecordSource', 'RecordSourceError', 'InMemoryRecordSource', 'YamlRecordSource']

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Protocol

import yaml

logger = logging.getLogger(__name__)

# Top-level keys accepted when a snapshot file is a mapping rather than a list
RECORD_LIST_KEYS = ('records', 'participants')


class RecordSourceError(Exception):
    """Raised when a record source cannot supply a snapshot."""


class RecordSource(Protocol):
    """
    Protocol for record sources.

    Methods:
        fetch_records() -> List[Any]:
            Return the full current set of registration records.
    """
    def fetch_records(self) -> List[Any]:
        ...


class InMemoryRecordSource:
    """
    Record source backed by an in-memory list.

    Attributes:
        records (List[Any]): Records returned by fetch_records.
    """

    def __init__(self, records: Optional[Iterable[Any]] = None) -> None:
        self.records: List[Any] = list(records) if records is not None else []

    def fetch_records(self) -> List[Any]:
        """Return a copy of the held records."""
        return list(self.records)


class YamlRecordSource:
    """
    Record source reading a YAML (or JSON) snapshot file.

    The document is either a list of record mappings or a mapping holding that
    list under 'records' or 'participants'.

    Attributes:
        path (Path): Snapshot file location.
    """

    def __init__(self, path: Path) -> None:
        if not isinstance(path, Path):
            raise TypeError("path must be a pathlib.Path")
        self.path = path

    def fetch_records(self) -> List[Any]:
        """
        Load the snapshot file.

        Returns:
            List[Any]: Raw record mappings.

        Raises:
            RecordSourceError: If the file is missing, unparsable or of the wrong shape.
        """
        if not self.path.exists():
            raise RecordSourceError(f"Record snapshot not found: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise RecordSourceError(f"Error reading {self.path}: {e}") from e

        if data is None:
            records: List[Any] = []
        elif isinstance(data, list):
            records = data
        elif isinstance(data, Mapping):
            records = None
            for key in RECORD_LIST_KEYS:
                if isinstance(data.get(key), list):
                    records = data[key]
                    break
            if records is None:
                raise RecordSourceError(
                    f"{self.path} has no {' or '.join(RECORD_LIST_KEYS)} list"
                )
        else:
            raise RecordSourceError(f"{self.path} must contain a list of records")

        logger.info(f"Loaded {len(records)} records from {self.path}")
        return records
