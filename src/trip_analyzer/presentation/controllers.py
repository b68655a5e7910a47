import logging
from pathlib import Path
from typing import List, Optional

from ..application.interfaces import ITripAnalysisUseCase
from ..config import AnalysisConfig
from ..domain.entities import IngestionReport, SlotCount, ZoneCount
from ..domain.interfaces import IRankingWriter


def format_zone_table(zones: List[ZoneCount]) -> List[str]:
    if not zones:
        return ["(nessuna zona)"]
    width = max(len("Zona"), *(len(entry.zone) for entry in zones))
    lines = [f"{'#':>3}  {'Zona':<{width}}  {'Viaggi':>8}"]
    for position, entry in enumerate(zones, start=1):
        lines.append(f"{position:>3}  {entry.zone:<{width}}  {entry.count:>8}")
    return lines


def format_slot_table(slots: List[SlotCount]) -> List[str]:
    if not slots:
        return ["(nessuna fascia oraria)"]
    width = max(len("Zona"), *(len(entry.zone) for entry in slots))
    lines = [f"{'#':>3}  {'Zona':<{width}}  {'Ora':>5}  {'Viaggi':>8}"]
    for position, entry in enumerate(slots, start=1):
        lines.append(f"{position:>3}  {entry.zone:<{width}}  {entry.hour:02d}:00  {entry.count:>8}")
    return lines


class TripAnalysisController:
    def __init__(
        self,
        use_case: ITripAnalysisUseCase,
        logger: logging.LoggerAdapter,
        writer: Optional[IRankingWriter] = None
    ):
        self.use_case = use_case
        self.logger = logger
        self.writer = writer

    def run_analysis(self, config: AnalysisConfig) -> IngestionReport:
        self.logger.info(f"Avvio analisi del file: {config.input_path}")
        report = self.use_case.ingest_file(config.input_path)

        if report.status == "SOURCE_UNAVAILABLE":
            self.logger.warning(f"File non leggibile: {config.input_path}. Classifiche vuote.")

        zones = self.use_case.top_zones(config.top_zones_k)
        slots = self.use_case.top_busy_slots(config.top_slots_k)

        self.logger.info(f"Top {config.top_zones_k} zone di partenza:")
        for line in format_zone_table(zones):
            self.logger.info(line)

        self.logger.info(f"Top {config.top_slots_k} fasce (zona, ora):")
        for line in format_slot_table(slots):
            self.logger.info(line)

        self.logger.info(
            f"Riepilogo: Righe={report.total_lines}, Valide={report.parsed_lines}, Scartate={report.skipped_lines}"
        )

        if self.writer is not None and config.export_enabled:
            self.writer.write_zone_ranking(zones, Path(config.top_zones_file).name)
            self.writer.write_slot_ranking(slots, Path(config.top_slots_file).name)
            self.writer.write_ingestion_summary(report, self.use_case.get_summary(), Path(config.summary_file).name)

        return report
