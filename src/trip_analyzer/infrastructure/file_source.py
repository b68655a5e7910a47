import logging
from typing import Iterator

from ..domain.interfaces import ITripLineSource
from ..application.errors import DataSourceError


class TextFileLineSource(ITripLineSource):

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.logger = logging.getLogger(self.__class__.__name__)

    def iter_lines(self, path: str) -> Iterator[str]:
        try:
            with open(path, "r", encoding=self.encoding, errors="replace", newline="") as trip_file:
                self.logger.debug(f"Lettura di {path} avviata.")
                for line in trip_file:
                    yield line.rstrip("\r\n")
        except OSError as error:
            self.logger.warning(f"Lettura di {path} fallita. Causa: {error}")
            raise DataSourceError(f"Impossibile leggere {path}") from error
