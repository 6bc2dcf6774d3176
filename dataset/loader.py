"""
Dataset loading pipeline
Reads the four dataset files into a database and writes the rejected rows
"""
import logging
import time
from typing import Optional

from database import Database

from .error_output import DatasetErrorOutput
from .flights_loader import load_flights
from .input import DatasetInput
from .passengers_loader import load_passengers
from .reservations_loader import load_reservations
from .users_loader import load_users

logger = logging.getLogger(__name__)

# Users before flights and reservations, users and flights before passengers
LOADING_PHASES = (
    ("users", load_users),
    ("flights", load_flights),
    ("passengers", load_passengers),
    ("reservations", load_reservations),
)


def load_dataset(database: Database, dataset_dir: str, errors_dir: Optional[str] = None) -> None:
    """
    Load a dataset directory into a database

    Args:
        database: Empty database to fill
        dataset_dir: Directory with users.csv, flights.csv, passengers.csv and reservations.csv
        errors_dir: Directory for the error files (rejected rows are discarded when None)

    Raises:
        DatasetLoadError: An input file could not be opened
    """
    with DatasetInput(dataset_dir) as dataset_input, DatasetErrorOutput(errors_dir) as errors:
        for name, load_phase in LOADING_PHASES:
            start = time.perf_counter()
            load_phase(database, dataset_input, errors)
            logger.debug("Loaded %s in %.3fs", name, time.perf_counter() - start)

    logger.info("Loaded %d users, %d flights and %d reservations",
                len(database.users), len(database.flights), len(database.reservations))
