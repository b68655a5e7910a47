from dataclasses import dataclass
import os
from typing import Optional

from .application.errors import InvalidInputError
from .domain.types import ExportFormat, SUPPORTED_EXPORT_FORMATS

DEFAULT_TOP_K = 10


@dataclass
class AnalysisConfig:
    """
    Parametri di una singola analisi: file in ingresso, dimensione delle
    classifiche e destinazione dei risultati esportati.
    """

    # --- Sorgente ---
    input_path: str                        # File CSV dei viaggi

    # --- Dimensione delle classifiche ---
    top_zones_k: int = DEFAULT_TOP_K
    top_slots_k: int = DEFAULT_TOP_K

    # --- Esportazione (disattivata se output_directory è None) ---
    output_directory: Optional[str] = None
    export_format: ExportFormat = "csv"

    # --- Nomi base dei file di output ---
    zones_ranking_name: str = "top_zones"
    slots_ranking_name: str = "top_busy_slots"
    summary_name: str = "ingestion_summary"

    def __post_init__(self):
        if self.export_format not in SUPPORTED_EXPORT_FORMATS:
            raise InvalidInputError(
                f"Formato di esportazione non supportato: {self.export_format}. "
                f"Valori ammessi: {', '.join(SUPPORTED_EXPORT_FORMATS)}"
            )

    @property
    def export_enabled(self) -> bool:
        return self.output_directory is not None

    @property
    def top_zones_file(self) -> Optional[str]:
        """Classifica delle zone di partenza più frequentate."""
        if not self.export_enabled:
            return None
        return os.path.join(self.output_directory, f"{self.zones_ranking_name}.{self.export_format}")

    @property
    def top_slots_file(self) -> Optional[str]:
        """Classifica delle fasce (zona, ora) più frequentate."""
        if not self.export_enabled:
            return None
        return os.path.join(self.output_directory, f"{self.slots_ranking_name}.{self.export_format}")

    @property
    def summary_file(self) -> Optional[str]:
        if not self.export_enabled:
            return None
        return os.path.join(self.output_directory, f"{self.summary_name}.json")


def read_int_env(name: str, default: int) -> int:
    raw_value = os.environ.get(name)
    if raw_value is None or raw_value.strip() == "":
        return default
    try:
        return int(raw_value)
    except ValueError as e:
        raise InvalidInputError(f"Variabile d'ambiente {name} non valida: {raw_value!r}") from e


def build_config(
    input_path: str,
    top_zones_k: Optional[int] = None,
    top_slots_k: Optional[int] = None,
    output_directory: Optional[str] = None,
    export_format: Optional[str] = None,
) -> AnalysisConfig:
    """Argomenti espliciti, poi variabili d'ambiente (TRIP_*), poi default."""
    return AnalysisConfig(
        input_path=input_path,
        top_zones_k=top_zones_k if top_zones_k is not None else read_int_env("TRIP_TOP_ZONES", DEFAULT_TOP_K),
        top_slots_k=top_slots_k if top_slots_k is not None else read_int_env("TRIP_TOP_SLOTS", DEFAULT_TOP_K),
        output_directory=output_directory or os.environ.get("TRIP_OUTPUT_DIR") or None,
        export_format=export_format or os.environ.get("TRIP_EXPORT_FORMAT", "csv"),
    )
