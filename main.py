"""
Main entry point for the airline dataset engine
Loads a dataset and answers every query of a query file (batch mode)
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from config import get_settings
from database import Database
from dataset import DatasetLoadError, load_dataset
from queries import QueryInstance, QueryWriter, dispatch, parse_query_file

logger = logging.getLogger("airline_dataset_engine")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="airline-dataset-engine",
        description="Load an airline and hotel dataset and answer the queries in a query file",
    )
    parser.add_argument("dataset_dir", help="Directory with users.csv, flights.csv, passengers.csv "
                                            "and reservations.csv")
    parser.add_argument("query_file", help="File with one query per line")
    parser.add_argument("--output-dir", help="Directory for error files and query results "
                                             "(defaults to RESULTS_DIR)")
    return parser


def output_path(output_dir: str, instance: QueryInstance) -> str:
    return os.path.join(output_dir, f"command{instance.line_number}_output.txt")


def run_batch(dataset_dir: str, query_file: str, output_dir: str) -> int:
    """
    Load a dataset and write the result of every query

    Args:
        dataset_dir: Dataset directory
        query_file: Query file
        output_dir: Directory for error files and query results

    Returns:
        Process exit status
    """
    database = Database()
    try:
        load_dataset(database, dataset_dir, output_dir)
    except DatasetLoadError as e:
        logger.error("Failed to load dataset: %s", e)
        return 1
    except OSError as e:
        logger.error("Failed to write error files to %s: %s", output_dir, e)
        return 1

    try:
        with open(query_file, "r", encoding="utf-8") as stream:
            instances = parse_query_file(stream)
    except OSError as e:
        logger.error("Failed to open query file: %s", e)
        return 1

    # Rejected queries still get an (empty) output file
    for instance in instances:
        if not instance.is_valid:
            QueryWriter(output_path(output_dir, instance)).close()

    dispatch(database, instances,
             lambda instance: QueryWriter(output_path(output_dir, instance), instance.formatted))
    logger.info("Answered %d queries", len(instances))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Invalid configuration: %s", e)
        return 1

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING), format=LOG_FORMAT)
    try:
        return run_batch(args.dataset_dir, args.query_file, args.output_dir or settings.results_dir)
    except MemoryError:
        logger.critical("Out of memory")
        return 1


if __name__ == '__main__':
    sys.exit(main())
