from typing import Literal

IngestionStatus = Literal[
    "SUCCESS",
    "SOURCE_UNAVAILABLE",
]
"""
Esito di una singola esecuzione di ingestione.

Valori possibili:
- SUCCESS:
    Il file è stato letto per intero. Le righe valide sono state aggregate,
    quelle malformate sono state scartate e conteggiate in `skipped_lines`.
- SOURCE_UNAVAILABLE:
    Il file non esiste o non è leggibile. Lo stato di aggregazione resta vuoto
    e non viene sollevato alcun errore verso il chiamante.
"""

ExportFormat = Literal["csv", "parquet"]

SUPPORTED_EXPORT_FORMATS = ("csv", "parquet")
