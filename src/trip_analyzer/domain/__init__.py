from .entities import ZoneCount, SlotCount, TripAggregates, IngestionReport
from .interfaces import ITripLineSource, IRankingWriter
from .parsing import parse_trip_line, parse_hour_from_datetime
from .ranking import top_zones, top_busy_slots, select_top_k
from .types import IngestionStatus, ExportFormat

__all__ = [
    "ZoneCount",
    "SlotCount",
    "TripAggregates",
    "IngestionReport",
    "ITripLineSource",
    "IRankingWriter",
    "parse_trip_line",
    "parse_hour_from_datetime",
    "top_zones",
    "top_busy_slots",
    "select_top_k",
    "IngestionStatus",
    "ExportFormat",
]
