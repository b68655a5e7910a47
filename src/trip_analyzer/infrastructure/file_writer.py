import os
import json
import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Union

import polars as pl

from ..application.errors import ExportError
from ..domain.interfaces import IRankingWriter
from ..domain.entities import IngestionReport, SlotCount, ZoneCount


class RankingFileWriter(IRankingWriter):

    def __init__(
        self,
        output_directory: str,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None
    ):
        self.output_directory = output_directory
        os.makedirs(self.output_directory, exist_ok=True)
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.logger.info(f"RankingFileWriter inizializzato. Directory di output: {self.output_directory}")

    def _write_dataframe(self, df: pl.DataFrame, filename: str) -> str:
        output_path = os.path.join(self.output_directory, filename)
        try:
            if filename.endswith(".parquet"):
                df.write_parquet(output_path)
            else:
                df.write_csv(output_path)
        except Exception as e:
            raise ExportError(f"Scrittura di {output_path} fallita: {e}") from e

        self.logger.info(f"Classifica salvata in: {output_path} ({df.height} righe)")
        return output_path

    def write_zone_ranking(self, zones: List[ZoneCount], filename: str) -> str:
        df = pl.DataFrame(
            {
                "rank": list(range(1, len(zones) + 1)),
                "zone": [entry.zone for entry in zones],
                "count": [entry.count for entry in zones],
            },
            schema={"rank": pl.Int64, "zone": pl.Utf8, "count": pl.Int64},
        )
        return self._write_dataframe(df, filename)

    def write_slot_ranking(self, slots: List[SlotCount], filename: str) -> str:
        df = pl.DataFrame(
            {
                "rank": list(range(1, len(slots) + 1)),
                "zone": [entry.zone for entry in slots],
                "hour": [entry.hour for entry in slots],
                "count": [entry.count for entry in slots],
            },
            schema={"rank": pl.Int64, "zone": pl.Utf8, "hour": pl.Int64, "count": pl.Int64},
        )
        return self._write_dataframe(df, filename)

    def write_ingestion_summary(self, report: IngestionReport, extra: Dict[str, Any], filename: str) -> str:
        output_path = os.path.join(self.output_directory, filename)
        payload = {**asdict(report), **extra}
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=4)
        except OSError as e:
            raise ExportError(f"Scrittura di {output_path} fallita: {e}") from e

        self.logger.info(f"Riepilogo ingestione salvato in: {output_path}")
        return output_path
