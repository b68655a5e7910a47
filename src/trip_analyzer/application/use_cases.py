import logging
from typing import Any, Dict, List, Optional, Union

from .interfaces import ITripAnalysisUseCase
from .errors import DataSourceError
from ..domain.interfaces import ITripLineSource
from ..domain.entities import IngestionReport, SlotCount, TripAggregates, ZoneCount
from ..domain.parsing import parse_trip_line
from ..domain import ranking as domain_ranking


class TripAnalysisService(ITripAnalysisUseCase):
    """
    Ingestione di un file di viaggi e interrogazione delle classifiche.

    Un'istanza ha un solo scrittore: le query vanno eseguite solo dopo che
    `ingest_file` è terminata. Ingestione e query concorrenti sulla stessa
    istanza non sono supportate.
    """

    def __init__(
        self,
        line_source: ITripLineSource,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None
    ):
        self.source = line_source
        self.aggregates = TripAggregates()
        self.last_report: Optional[IngestionReport] = None
        self.logger = logger or logging.getLogger(__name__)

    def reset(self) -> None:
        self.aggregates.reset()
        self.last_report = None

    def ingest_file(self, path: str) -> IngestionReport:
        self.reset()
        num_total, num_parsed, num_skipped = 0, 0, 0

        try:
            for line in self.source.iter_lines(path):
                num_total += 1
                parsed = parse_trip_line(line)

                if parsed is None:
                    num_skipped += 1
                    self.logger.debug(f"Riga {num_total} scartata: {line!r}")
                    continue

                zone, hour = parsed
                self.aggregates.record(zone, hour)
                num_parsed += 1

        except DataSourceError as error:
            self.aggregates.reset()
            self.logger.warning(f"Sorgente {path} non disponibile: {error}. Nessun dato aggregato.")
            self.last_report = IngestionReport(source=path, status="SOURCE_UNAVAILABLE")
            return self.last_report

        self.last_report = IngestionReport(
            source=path,
            status="SUCCESS",
            total_lines=num_total,
            parsed_lines=num_parsed,
            skipped_lines=num_skipped,
        )
        self.logger.info(
            f"Ingestione di {path} completata: total={num_total}, "
            f"parsed={num_parsed}, skipped={num_skipped}"
        )
        return self.last_report

    def top_zones(self, k: int) -> List[ZoneCount]:
        return domain_ranking.top_zones(self.aggregates.zone_counts, k)

    def top_busy_slots(self, k: int) -> List[SlotCount]:
        return domain_ranking.top_busy_slots(self.aggregates.slot_counts, k)

    def get_summary(self) -> Dict[str, Any]:
        return {
            "total_trips": self.aggregates.total_trips,
            "distinct_zones": self.aggregates.distinct_zones,
            "distinct_slots": self.aggregates.distinct_slots,
        }
