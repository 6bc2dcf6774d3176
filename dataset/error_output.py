"""
Error files receiving the dataset rows rejected by the loaders
"""
import os
from typing import Optional, TextIO

USERS_ERRORS_FILE = "users_errors.csv"
FLIGHTS_ERRORS_FILE = "flights_errors.csv"
PASSENGERS_ERRORS_FILE = "passengers_errors.csv"
RESERVATIONS_ERRORS_FILE = "reservations_errors.csv"

USERS_HEADER = ("id;name;email;phone_number;birth_date;sex;passport;country_code;address;"
                "account_creation;pay_method;account_status")
FLIGHTS_HEADER = ("id;airline;plane_model;total_seats;origin;destination;schedule_departure_date;"
                  "schedule_arrival_date;real_departure_date;real_arrival_date;pilot;copilot;notes")
PASSENGERS_HEADER = "flight_id;user_id"
RESERVATIONS_HEADER = ("id;user_id;hotel_id;hotel_name;hotel_stars;city_tax;address;begin_date;"
                       "end_date;price_per_night;includes_breakfast;room_details;rating;comment")


class DatasetErrorOutput:
    """
    The four error files of a dataset load

    Every file starts with the header of its input file. When no directory
    is given, rejected rows are discarded.
    """

    def __init__(self, directory: Optional[str] = None):
        self.directory = directory
        self._users = self._flights = self._passengers = self._reservations = None
        if directory is None:
            return

        os.makedirs(directory, exist_ok=True)
        try:
            self._users = self._open(USERS_ERRORS_FILE, USERS_HEADER)
            self._flights = self._open(FLIGHTS_ERRORS_FILE, FLIGHTS_HEADER)
            self._passengers = self._open(PASSENGERS_ERRORS_FILE, PASSENGERS_HEADER)
            self._reservations = self._open(RESERVATIONS_ERRORS_FILE, RESERVATIONS_HEADER)
        except OSError:
            self.close()
            raise

    def _open(self, name: str, header: str) -> TextIO:
        stream = open(os.path.join(self.directory, name), "w", encoding="utf-8", newline="")
        stream.write(header + "\n")
        return stream

    @staticmethod
    def _report(stream: Optional[TextIO], line: str) -> None:
        if stream is not None:
            stream.write(line + "\n")

    def report_user_error(self, line: str) -> None:
        self._report(self._users, line)

    def report_flight_error(self, line: str) -> None:
        self._report(self._flights, line)

    def report_passenger_error(self, line: str) -> None:
        self._report(self._passengers, line)

    def report_reservation_error(self, line: str) -> None:
        self._report(self._reservations, line)

    def close(self) -> None:
        for stream in (self._users, self._flights, self._passengers, self._reservations):
            if stream is not None:
                stream.close()
        self._users = self._flights = self._passengers = self._reservations = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
