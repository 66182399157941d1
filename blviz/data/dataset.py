"""
Dataset parsing for precomputed boundary-layer tables.

The resource is a header line followed by rows of
``nu,uInf,x,reX,delta99``. Every non-blank row becomes one Record;
fields that cannot be converted are kept as NaN and reported as
ParseAnomaly entries instead of dropping the row.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Tuple, Iterator, Union, List

import requests
from loguru import logger

from ..constants import COLUMNS, N_COLUMNS
from ..errors import LoadError


class Record(NamedTuple):
    """One row of the source table."""
    nu: float       # Kinematic viscosity [m^2/s]
    u_inf: float    # Free-stream velocity [m/s]
    x: float        # Streamwise position [m]
    re_x: float     # Local Reynolds number as stored in the table
    delta99: float  # Boundary-layer thickness [m]


class ParseAnomaly(NamedTuple):
    """A field that did not convert to a finite number."""
    line_number: int  # 1-based, counting the header
    field: str
    raw: str


@dataclass(frozen=True)
class Dataset:
    """Records in source-row order, plus what went wrong while parsing."""
    records: Tuple[Record, ...] = ()
    anomalies: Tuple[ParseAnomaly, ...] = ()
    source: str = "<text>"

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]

    @property
    def is_empty(self) -> bool:
        return not self.records


def _parse_field(raw: str) -> float:
    """Convert one field, returning NaN when it is not a finite number."""
    text = raw.strip()
    if not text:
        return math.nan
    try:
        value = float(text)
    except ValueError:
        return math.nan
    return value if math.isfinite(value) else math.nan


def parse_row(line: str, line_number: int) -> Tuple[Record, List[ParseAnomaly]]:
    """Parse one comma-separated row into a Record.
    
    Missing trailing fields are NaN and extra fields are ignored.
    """
    parts = line.split(',')
    values = []
    anomalies = []
    for i, name in enumerate(COLUMNS):
        raw = parts[i] if i < len(parts) else ""
        value = _parse_field(raw)
        if not math.isfinite(value):
            anomalies.append(ParseAnomaly(line_number, name, raw))
        values.append(value)
    return Record(*values), anomalies


def parse_dataset(text: str, source: str = "<text>") -> Dataset:
    """
    Parse raw CSV text into a Dataset.
    
    The first line is always treated as the header. Blank lines (including
    trailing ones) are skipped.
    
    Parameters
    ----------
    text : str
        Full contents of the resource.
    source : str
        Name used in log messages.
        
    Returns
    -------
    Dataset
        One record per non-blank line after the header.
    """
    lines = text.split('\n')[1:]
    records = []
    anomalies = []
    
    for offset, line in enumerate(lines):
        line = line.rstrip('\r')
        if not line.strip():
            continue
        record, row_anomalies = parse_row(line, line_number=offset + 2)
        records.append(record)
        anomalies.extend(row_anomalies)
    
    if anomalies:
        bad_rows = len({a.line_number for a in anomalies})
        logger.warning(
            f"{len(anomalies)} field(s) in {bad_rows} row(s) of {source} "
            f"are not finite numbers and were kept as NaN"
        )
        for a in anomalies[:N_COLUMNS]:
            logger.debug(f"  line {a.line_number}: {a.field}={a.raw!r}")
    
    return Dataset(records=tuple(records), anomalies=tuple(anomalies), source=source)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_resource(source: Union[str, Path], timeout: float = 30.0) -> str:
    """
    Read the dataset resource from a path or an http(s) URL.
    
    Raises
    ------
    LoadError
        If the file or URL cannot be read. No retry is attempted.
    """
    source = str(source)
    
    if _is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise LoadError(source, e) from e
        return response.text
    
    try:
        return Path(source).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(source, e) from e


def load_dataset(source: Union[str, Path], timeout: float = 30.0) -> Dataset:
    """Read and parse the dataset resource in one step."""
    logger.info(f"Starting data load from {source}")
    text = read_resource(source, timeout=timeout)
    return parse_dataset(text, source=str(source))
