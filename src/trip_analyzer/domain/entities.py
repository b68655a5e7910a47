from dataclasses import dataclass
from typing import Dict, Tuple

from .types import IngestionStatus


@dataclass(frozen=True)
class ZoneCount:
    zone: str
    count: int


@dataclass(frozen=True)
class SlotCount:
    zone: str
    hour: int
    count: int


@dataclass(frozen=True)
class IngestionReport:
    source: str
    status: IngestionStatus
    total_lines: int = 0
    parsed_lines: int = 0
    skipped_lines: int = 0


class TripAggregates:
    """
    Stato di aggregazione di una esecuzione di ingestione: due tabelle di
    frequenza, una per zona e una per coppia (zona, ora).

    Ogni riga valida incrementa entrambe le tabelle insieme, per cui il
    conteggio di una zona coincide sempre con la somma dei conteggi dei suoi slot.
    """

    def __init__(self):
        self.zone_counts: Dict[str, int] = {}
        self.slot_counts: Dict[Tuple[str, int], int] = {}

    def record(self, zone: str, hour: int) -> None:
        self.zone_counts[zone] = self.zone_counts.get(zone, 0) + 1
        slot_key = (zone, hour)
        self.slot_counts[slot_key] = self.slot_counts.get(slot_key, 0) + 1

    def reset(self) -> None:
        self.zone_counts.clear()
        self.slot_counts.clear()

    def slots_for_zone(self, zone: str) -> Dict[int, int]:
        """Conteggi orari di una singola zona (ora -> viaggi)."""
        return {hour: count for (slot_zone, hour), count in self.slot_counts.items() if slot_zone == zone}

    @property
    def total_trips(self) -> int:
        return sum(self.zone_counts.values())

    @property
    def distinct_zones(self) -> int:
        return len(self.zone_counts)

    @property
    def distinct_slots(self) -> int:
        return len(self.slot_counts)

    def is_empty(self) -> bool:
        return not self.zone_counts
