"""Pytest configuration and fixtures."""
import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import Database
from dataset import load_dataset
from dataset.error_output import FLIGHTS_HEADER, PASSENGERS_HEADER, RESERVATIONS_HEADER, USERS_HEADER


SAMPLE_USERS = [
    "JT910;Jess;jess@mail.com;+1;1990/01/02;F;P0;PT;home;2020/01/02 10:00:00;CC;active",
    "AB123;Anna Bell;anna@mail.com;+2;1985/10/02;F;P1;ES;street;2021/05/04 08:30:00;cash;active",
    "AN456;Andre Neves;andre@mail.pt;+3;2000/10/01;M;P2;PT;road;2021/05/04 09:00:00;cash;inactive",
    "AB100;Anna Bell;annab@mail.com;+4;1970/06/15;F;P3;FR;avenue;2022/02/10 12:00:00;cash;ACTIVE",
    "XX001;;x@mail.com;+5;1990/01/01;M;P4;PT;home;2020/01/01 00:00:00;CC;active",
    "XX002;Bad Email;bademail;+6;1990/01/01;M;P5;PT;home;2020/01/01 00:00:00;CC;active",
    "XX003;Late;late@mail.com;+7;2021/01/01;M;P6;PT;home;2020/01/01 00:00:00;CC;active",
]

SAMPLE_FLIGHTS = [
    "0000000001;TAP;A320;2;LIS;OPO;2023/03/10 10:00:00;2023/03/10 11:00:00;"
    "2023/03/10 10:30:00;2023/03/10 11:30:00;Pilot;Copilot;",
    "0000000002;TAP;A320;2;LIS;MAD;2023/05/01 08:00:00;2023/05/01 10:00:00;"
    "2023/05/01 08:00:00;2023/05/01 10:00:00;Pilot;Copilot;full",
    "0000000003;Iberia;A321;100;MAD;LIS;2022/07/01 09:00:00;2022/07/01 10:00:00;"
    "2022/07/01 09:10:00;2022/07/01 10:10:00;Pilot;Copilot;",
    "0000000004;Iberia;A321;100;opo;LIS;2023/03/11 18:00:00;2023/03/11 19:00:00;"
    "2023/03/11 18:00:00;2023/03/11 19:00:00;Pilot;Copilot;",
    "0000000005;TAP;A320;10;LIS;OPO;2023/03/10 10:00:00;2023/03/10 09:00:00;"
    "2023/03/10 10:00:00;2023/03/10 11:00:00;Pilot;Copilot;",
    "00000000AB;TAP;A320;10;LIS;OPO;2023/03/10 10:00:00;2023/03/10 11:00:00;"
    "2023/03/10 10:00:00;2023/03/10 11:00:00;Pilot;Copilot;",
    "0000000006;TAP;A320;10;LIS;OPO;2023/03/10 10:00:00;2023/03/10 11:00:00;"
    "2023/03/10 10:00:00;2023/03/10 09:59:59;Pilot;Copilot;",
]

SAMPLE_PASSENGERS = [
    "0000000001;JT910",
    "0000000001;AB123",
    "0000000002;JT910",
    "0000000002;AB123",
    "0000000002;AB100",
    "0000000003;JT910",
    "0000000003;AB123",
    "0000000003;XX001",
    "0000000099;JT910",
]

SAMPLE_RESERVATIONS = [
    "Book0000000001;JT910;HTL1001;Hotel Lisboa;4;10;Rua A;2023/03/12;2023/03/15;100;True;Suite;5;great",
    "Book0000000002;AB123;HTL1001;Hotel Lisboa;4;10;Rua A;2023/03/12;2023/03/14;200;f;;3;",
    "Book0000000003;JT910;HTL1001;Hotel Lisboa;4;10;Rua A;2023/04/01;2023/04/02;150;;;;",
    "Book0000000004;AB100;HTL2002;Hotel Porto;3;0;Rua B;2023/01/01;2023/01/05;80;1;;4;",
    "Book0000000005;XX001;HTL1001;Hotel Lisboa;4;10;Rua A;2023/03/12;2023/03/15;100;True;;5;",
    "Book0000000006;JT910;HTL1001;Hotel Lisboa;4;10;Rua A;2023/03/15;2023/03/12;100;True;;5;",
    "Book0000000007;JT910;HTL1001;Hotel Lisboa;6;10;Rua A;2023/03/12;2023/03/15;100;True;;5;",
    "Book0000000008;JT910;HTL1001;Hotel Lisboa;4;10;Rua A;2023/03/12;2023/03/15;100;True;;9;",
    "BookABCDEFGHIJ;JT910;HTL1001;Hotel Lisboa;4;10;Rua A;2023/03/12;2023/03/15;100;True;;5;",
]


def write_dataset(directory, users=(), flights=(), passengers=(), reservations=()):
    """Write the four dataset files, each with its header and a trailing newline."""
    os.makedirs(directory, exist_ok=True)
    files = (
        ("users.csv", USERS_HEADER, users),
        ("flights.csv", FLIGHTS_HEADER, flights),
        ("passengers.csv", PASSENGERS_HEADER, passengers),
        ("reservations.csv", RESERVATIONS_HEADER, reservations),
    )
    for name, header, rows in files:
        with open(os.path.join(directory, name), "w", encoding="utf-8", newline="") as stream:
            stream.write("".join(line + "\n" for line in [header, *rows]))
    return directory


def pytest_addoption(parser):
    """Register custom CLI options for the test suite."""
    parser.addoption(
        "--performance",
        action="store_true",
        default=False,
        help="Run the performance test suite",
    )
    parser.addoption(
        "--performance-users",
        type=int,
        default=20000,
        help="Number of users to generate for performance tests",
    )
    parser.addoption(
        "--performance-flights",
        type=int,
        default=2000,
        help="Number of flights to generate for performance tests",
    )
    parser.addoption(
        "--performance-reservations",
        type=int,
        default=50000,
        help="Number of reservations to generate for performance tests",
    )


def pytest_configure(config):
    """Declare custom markers to avoid pytest warnings."""
    config.addinivalue_line(
        "markers",
        "performance: marks performance tests that only run when --performance is supplied",
    )


def pytest_collection_modifyitems(config, items):
    """Skip performance tests unless the dedicated flag is present."""
    if config.getoption("--performance"):
        return

    skip_marker = pytest.mark.skip(
        reason="Performance tests only run when --performance flag is provided",
    )
    for item in items:
        if "performance" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture(scope='function')
def make_dataset(tmp_path):
    """Return a function writing a dataset directory under tmp_path."""
    def _make(name="dataset", **rows):
        return write_dataset(str(tmp_path / name), **rows)
    return _make


@pytest.fixture(scope='function')
def sample_dataset(make_dataset):
    """Sample dataset with valid and malformed rows in every file"""
    return make_dataset(
        users=SAMPLE_USERS,
        flights=SAMPLE_FLIGHTS,
        passengers=SAMPLE_PASSENGERS,
        reservations=SAMPLE_RESERVATIONS,
    )


@pytest.fixture(scope='function')
def errors_dir(tmp_path):
    return str(tmp_path / "Resultados")


@pytest.fixture(scope='function')
def database(sample_dataset, errors_dir):
    """Database loaded from the sample dataset, with error files in errors_dir"""
    db = Database()
    load_dataset(db, sample_dataset, errors_dir)
    return db
