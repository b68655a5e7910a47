import heapq
from typing import Callable, Dict, Iterable, List, Tuple, TypeVar

from .entities import SlotCount, ZoneCount

T = TypeVar("T")


def zone_sort_key(entry: ZoneCount) -> Tuple[int, str]:
    """Conteggio decrescente, poi zona in ordine lessicografico."""
    return -entry.count, entry.zone


def slot_sort_key(entry: SlotCount) -> Tuple[int, str, int]:
    """Conteggio decrescente, poi zona, poi ora crescente."""
    return -entry.count, entry.zone, entry.hour


def rank_full_sort(entries: Iterable[T], k: int, key: Callable[[T], tuple]) -> List[T]:
    if k <= 0:
        return []
    return sorted(entries, key=key)[:k]


def rank_bounded(entries: Iterable[T], k: int, key: Callable[[T], tuple]) -> List[T]:
    """
    Selezione top-k con un heap limitato a k elementi (heapq.nsmallest):
    costo O(n log k), senza ordinare l'intera tabella. Il risultato è già ordinato.
    """
    if k <= 0:
        return []
    return heapq.nsmallest(k, entries, key=key)


def select_top_k(entries: List[T], k: int, key: Callable[[T], tuple]) -> List[T]:
    if k <= 0 or not entries:
        return []
    if len(entries) <= k:
        return rank_full_sort(entries, k, key)
    return rank_bounded(entries, k, key)


def top_zones(zone_counts: Dict[str, int], k: int) -> List[ZoneCount]:
    if k <= 0 or not zone_counts:
        return []
    entries = [ZoneCount(zone=zone, count=count) for zone, count in zone_counts.items()]
    return select_top_k(entries, k, zone_sort_key)


def top_busy_slots(slot_counts: Dict[Tuple[str, int], int], k: int) -> List[SlotCount]:
    if k <= 0 or not slot_counts:
        return []
    entries = [
        SlotCount(zone=zone, hour=hour, count=count)
        for (zone, hour), count in slot_counts.items()
        if count > 0
    ]
    return select_top_k(entries, k, slot_sort_key)
