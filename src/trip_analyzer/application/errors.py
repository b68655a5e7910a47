class TripAnalysisError(Exception):
    pass

class DataSourceError(TripAnalysisError):
    pass

class InvalidInputError(TripAnalysisError, ValueError):
    pass

class ExportError(TripAnalysisError):
    pass
