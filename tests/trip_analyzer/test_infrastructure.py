import json
import logging

import polars as pl
import pytest

from src.trip_analyzer.application.errors import DataSourceError
from src.trip_analyzer.domain.entities import IngestionReport, SlotCount, ZoneCount
from src.trip_analyzer.infrastructure.file_source import TextFileLineSource
from src.trip_analyzer.infrastructure.file_writer import RankingFileWriter
from src.trip_analyzer.infrastructure.logging_config import get_layer_logger

class TestTextFileLineSource:
    def test_lines_without_terminators(self, tmp_path):
        path = tmp_path / "crlf.csv"
        path.write_bytes(b"1,ZoneA,2023-01-01 08:15\r\n2,ZoneB,2023-01-01 09:15\r\n")

        lines = list(TextFileLineSource().iter_lines(str(path)))

        assert lines == ["1,ZoneA,2023-01-01 08:15", "2,ZoneB,2023-01-01 09:15"]

    def test_missing_file_raises_data_source_error(self, tmp_path):
        with pytest.raises(DataSourceError):
            list(TextFileLineSource().iter_lines(str(tmp_path / "assente.csv")))

    def test_read_error_mid_file_raises_data_source_error(self, unreadable_trip_file):
        """Un errore di I/O durante la lettura diventa DataSourceError e il file viene chiuso."""
        lines = []
        with pytest.raises(DataSourceError) as exc_info:
            for line in TextFileLineSource().iter_lines("trips.csv"):
                lines.append(line)

        assert lines == ["T1,ZoneA,ZoneB,2023-01-01 08:15,3.2,12.50"]
        assert isinstance(exc_info.value.__cause__, OSError)
        assert unreadable_trip_file.closed

    def test_invalid_bytes_are_replaced(self, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes(b"1,Zona\xe9,2023-01-01 08:15\n")

        lines = list(TextFileLineSource().iter_lines(str(path)))

        assert len(lines) == 1
        assert lines[0].endswith("2023-01-01 08:15")

class TestRankingFileWriter:
    def test_write_zone_ranking_csv(self, tmp_path):
        writer = RankingFileWriter(str(tmp_path / "out"))

        path = writer.write_zone_ranking([ZoneCount("ZoneA", 2), ZoneCount("ZoneB", 1)], "top_zones.csv")

        df = pl.read_csv(path)
        assert df.columns == ["rank", "zone", "count"]
        assert df["zone"].to_list() == ["ZoneA", "ZoneB"]
        assert df["rank"].to_list() == [1, 2]

    def test_write_slot_ranking_parquet(self, tmp_path):
        writer = RankingFileWriter(str(tmp_path))

        path = writer.write_slot_ranking([SlotCount("ZoneA", 8, 2)], "top_busy_slots.parquet")

        assert path.endswith("top_busy_slots.parquet")
        df = pl.read_parquet(path)
        assert df.row(0) == (1, "ZoneA", 8, 2)

    def test_write_empty_ranking(self, tmp_path):
        writer = RankingFileWriter(str(tmp_path))

        path = writer.write_zone_ranking([], "top_zones.csv")

        assert pl.read_csv(path).height == 0

    def test_write_ingestion_summary(self, tmp_path):
        writer = RankingFileWriter(str(tmp_path))
        report = IngestionReport("trips.csv", "SUCCESS", total_lines=4, parsed_lines=3, skipped_lines=1)

        path = writer.write_ingestion_summary(report, {"distinct_zones": 2}, "ingestion_summary.json")

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["status"] == "SUCCESS"
        assert data["skipped_lines"] == 1
        assert data["distinct_zones"] == 2

class TestLayerLogging:
    def test_layer_logger_prefixes_messages(self, caplog):
        logger = get_layer_logger("TripAnalysisService", "Application")

        with caplog.at_level(logging.INFO, logger="TripAnalysisService"):
            logger.info("Ingestione completata")

        assert "[Application] Ingestione completata" in caplog.messages
