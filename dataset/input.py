"""
Input streams of a dataset directory
"""
import os
from typing import List, TextIO

USERS_FILE = "users.csv"
FLIGHTS_FILE = "flights.csv"
PASSENGERS_FILE = "passengers.csv"
RESERVATIONS_FILE = "reservations.csv"


class DatasetLoadError(OSError):
    """Raised when a dataset file cannot be opened"""


def _open_input(path: str) -> TextIO:
    # newline='' leaves line terminators untouched
    return open(path, "r", encoding="utf-8", newline="")


class DatasetInput:
    """The four input files of a dataset, opened together"""

    def __init__(self, directory: str):
        """
        Open every input file

        Args:
            directory: Dataset directory

        Raises:
            DatasetLoadError: A file is missing or unreadable
        """
        self.directory = directory
        opened: List[TextIO] = []
        try:
            for name in (USERS_FILE, FLIGHTS_FILE, PASSENGERS_FILE, RESERVATIONS_FILE):
                opened.append(_open_input(os.path.join(directory, name)))
        except OSError as e:
            for stream in opened:
                stream.close()
            raise DatasetLoadError(f"Failed to open dataset file in {directory}: {e}") from e

        self.users, self.flights, self.passengers, self.reservations = opened

    def rewind_flights(self) -> None:
        self.flights.seek(0)

    def close(self) -> None:
        for stream in (self.users, self.flights, self.passengers, self.reservations):
            stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
