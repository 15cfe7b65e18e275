"""CSV reader for the labelled fear/greed dataset.

Expects a header row with at least ``date,volume,rate,prediction``. Extra
columns are ignored. Values are kept as strings; validation belongs to the
loader.
"""

import csv
from pathlib import Path

from btc_sentiment.exceptions import DatasetError
from btc_sentiment.logging import get_logger
from btc_sentiment.models import SourceRow

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("date", "volume", "rate", "prediction")


def read_source_rows(path: str | Path) -> list[SourceRow]:
    """Read every data row of a CSV file as SourceRow records.

    Raises:
        DatasetError: If the file cannot be opened or lacks a required column.
    """
    csv_path = Path(path)
    try:
        with csv_path.open(newline="", encoding="utf-8") as fh:
            reader = csv.DictReader(fh)
            header = [name.strip() for name in reader.fieldnames or []]
            missing = [c for c in REQUIRED_COLUMNS if c not in header]
            if missing:
                raise DatasetError(
                    f"{csv_path} is missing required columns: {', '.join(missing)}"
                )
            reader.fieldnames = header
            rows = [
                SourceRow(
                    date=record.get("date"),
                    volume=record.get("volume"),
                    rate=record.get("rate"),
                    prediction=record.get("prediction"),
                )
                for record in reader
            ]
    except OSError as e:
        raise DatasetError(f"Cannot read dataset {csv_path}: {e}") from e

    logger.info("csv_rows_read", path=str(csv_path), rows=len(rows))
    return rows
