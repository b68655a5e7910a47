from .use_cases import TripAnalysisService
from .interfaces import ITripAnalysisUseCase
from .errors import TripAnalysisError, DataSourceError, InvalidInputError, ExportError

__all__ = [
    "TripAnalysisService",
    "ITripAnalysisUseCase",
    "TripAnalysisError",
    "DataSourceError",
    "InvalidInputError",
    "ExportError",
]
