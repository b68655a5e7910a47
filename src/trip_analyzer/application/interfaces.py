from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..domain.entities import IngestionReport, SlotCount, ZoneCount


class ITripAnalysisUseCase(ABC):
    @abstractmethod
    def ingest_file(self, path: str) -> IngestionReport:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass

    @abstractmethod
    def top_zones(self, k: int) -> List[ZoneCount]:
        pass

    @abstractmethod
    def top_busy_slots(self, k: int) -> List[SlotCount]:
        pass

    @abstractmethod
    def get_summary(self) -> Dict[str, Any]:
        pass
