from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List

from .entities import IngestionReport, SlotCount, ZoneCount


class ITripLineSource(ABC):
    @abstractmethod
    def iter_lines(self, path: str) -> Iterator[str]:
        """Righe del file senza terminatore. Solleva DataSourceError se il file non è leggibile."""
        pass


class IRankingWriter(ABC):
    @abstractmethod
    def write_zone_ranking(self, zones: List[ZoneCount], filename: str) -> str:
        pass

    @abstractmethod
    def write_slot_ranking(self, slots: List[SlotCount], filename: str) -> str:
        pass

    @abstractmethod
    def write_ingestion_summary(self, report: IngestionReport, extra: Dict[str, Any], filename: str) -> str:
        pass
