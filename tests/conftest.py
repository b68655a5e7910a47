import pytest

SIX_COLUMN_ROWS = [
    "TripID,PickupZoneID,DropoffZoneID,PickupDateTime,DistanceKm,FareAmount",
    "T1,ZoneA,ZoneB,2023-01-01 08:15,3.2,12.50",
    "T2,ZoneA,ZoneC,2023-01-01 08:47,1.1,6.00",
    "T3,ZoneB,ZoneA,2023-01-01 09:02,4.0,15.00",
]

@pytest.fixture
def sample_trips_csv(tmp_path):
    """
    File CSV a 6 colonne con intestazione: l'intestazione non contiene un
    orario valido e deve essere scartata come riga malformata.
    """
    path = tmp_path / "trips.csv"
    path.write_text("\n".join(SIX_COLUMN_ROWS) + "\n", encoding="utf-8")
    return str(path)

@pytest.fixture
def noisy_trips_csv(tmp_path):
    rows = [
        "solo-un-campo",
        "zoneA,no-time-here",
        "T9,ZoneX,ZoneY,2023-01-01 10:61,1.0,2.0",
        "T10,ZoneX,ZoneY,2023-01-01 24:10,1.0,2.0",
        "T11, ,ZoneY,2023-01-01 10:10,1.0,2.0",
        "",
        "1,ZoneQ,2023-01-01 07:30",
        "T12,ZoneX,ZoneY,2023-01-01 10:10,1.0,2.0",
    ]
    path = tmp_path / "noisy.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return str(path)

class _UnreadableTripFile:
    """File che restituisce alcune righe e poi fallisce con un errore di I/O."""

    def __init__(self, lines):
        self.lines = lines
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False

    def __iter__(self):
        for line in self.lines:
            yield line
        raise OSError(5, "Input/output error")

@pytest.fixture
def unreadable_trip_file(monkeypatch):
    from src.trip_analyzer.infrastructure import file_source

    broken_file = _UnreadableTripFile(["T1,ZoneA,ZoneB,2023-01-01 08:15,3.2,12.50\n"])
    monkeypatch.setattr(file_source, "open", lambda *args, **kwargs: broken_file, raising=False)
    return broken_file
