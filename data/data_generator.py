"""
Synthetic dataset generator
Writes users.csv, flights.csv, passengers.csv and reservations.csv with
realistic values, optionally mixed with malformed rows and overbooked flights
"""
from datetime import datetime, timedelta
import os
import random
import sys
from faker import Faker
from typing import Dict, List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dataset.error_output import FLIGHTS_HEADER, PASSENGERS_HEADER, RESERVATIONS_HEADER, USERS_HEADER
from dataset.input import FLIGHTS_FILE, PASSENGERS_FILE, RESERVATIONS_FILE, USERS_FILE

DATE_FORMAT = "%Y/%m/%d"
DATE_AND_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


def _format_row(values: List[str]) -> str:
    return ";".join(values)


class DataGenerator:
    """Generate realistic datasets for the dataset engine"""

    def __init__(self, seed: Optional[int] = None, invalid_ratio: float = 0.0):
        """
        Initialize data generator

        Args:
            seed: Random seed for reproducibility
            invalid_ratio: Fraction of rows written malformed (and of flights overbooked)
        """
        if seed is not None:
            random.seed(seed)
            Faker.seed(seed)

        self.faker = Faker()
        self.invalid_ratio = invalid_ratio

        self.airports = ['LIS', 'OPO', 'FAO', 'MAD', 'BCN', 'CDG', 'ORY', 'LHR', 'FRA', 'AMS',
                         'JFK', 'LAX', 'ORD', 'ATL', 'MIA', 'SFO', 'GRU', 'BOS']
        self.airlines = ['TAP Air Portugal', 'Iberia', 'Air France', 'Lufthansa', 'KLM',
                         'Delta', 'United', 'Ryanair', 'easyJet']
        self.plane_models = ['Boeing 737-800', 'Boeing 777-300', 'Airbus A320', 'Airbus A321neo',
                             'Airbus A330-900', 'Embraer E195']
        self.pay_methods = ['cash', 'credit_card', 'debit_card']
        self.hotels = [
            (f"HTL{1000 + i}", self.faker.company() + " Hotel", random.randint(1, 5), random.randint(0, 10))
            for i in range(12)
        ]

    def _is_invalid(self) -> bool:
        return random.random() < self.invalid_ratio

    def generate_users(self, count: int = 100) -> List[List[str]]:
        """
        Generate user rows

        Args:
            count: Number of users to generate

        Returns:
            List of rows, one list of column values per user
        """
        print(f"Generating {count} users...")
        rows = []
        for i in range(count):
            birth = self.faker.date_time_between(start_date=datetime(1950, 1, 1),
                                                 end_date=datetime(2005, 12, 31))
            creation = self.faker.date_time_between(start_date=datetime(2010, 1, 1),
                                                    end_date=datetime(2023, 9, 30))
            row = [
                f"{self.faker.last_name()[:3].upper()}{i:05d}",
                self.faker.name(),
                self.faker.free_email(),
                self.faker.numerify('+351 9########'),
                birth.strftime(DATE_FORMAT),
                random.choice(['M', 'F']),
                self.faker.bothify(text='??######', letters='ABCDEFGHIJKLMNOPQRSTUVWXYZ'),
                self.faker.country_code(),
                self.faker.street_address(),
                creation.strftime(DATE_AND_TIME_FORMAT),
                random.choice(self.pay_methods),
                random.choice(['active', 'active', 'inactive', 'ACTIVE']),
            ]

            if self._is_invalid():
                column, value = random.choice([
                    (1, ''),
                    (2, 'not-an-email'),
                    (4, '1990/13/01'),
                    (5, 'X'),
                    (7, 'PRT'),
                    (11, 'unknown'),
                ])
                row[column] = value
            rows.append(row)

        print(f"Generated {len(rows)} users")
        return rows

    def generate_flights(self, count: int = 50, year: int = 2023) -> List[List[str]]:
        """
        Generate flight rows

        Args:
            count: Number of flights to generate
            year: Year of the scheduled departures

        Returns:
            List of rows, one list of column values per flight
        """
        print(f"Generating {count} flights...")
        rows = []
        for i in range(count):
            origin, destination = random.sample(self.airports, 2)
            departure = self.faker.date_time_between(start_date=datetime(year, 1, 1),
                                                     end_date=datetime(year, 12, 20))
            arrival = departure + timedelta(hours=random.randint(1, 12), minutes=random.choice([0, 15, 30, 45]))
            delay = timedelta(minutes=random.choice([0, 0, 5, 10, 30, 90]))

            row = [
                f"{i + 1:010d}",
                random.choice(self.airlines),
                random.choice(self.plane_models),
                str(random.randint(10, 60)),
                origin.lower() if random.random() < 0.1 else origin,
                destination,
                departure.strftime(DATE_AND_TIME_FORMAT),
                arrival.strftime(DATE_AND_TIME_FORMAT),
                (departure + delay).strftime(DATE_AND_TIME_FORMAT),
                (arrival + delay).strftime(DATE_AND_TIME_FORMAT),
                self.faker.name(),
                self.faker.name(),
                self.faker.sentence() if random.random() < 0.3 else '',
            ]

            if self._is_invalid():
                column, value = random.choice([
                    (3, 'many'),
                    (4, 'LISB'),
                    (7, (departure - timedelta(hours=1)).strftime(DATE_AND_TIME_FORMAT)),
                    (10, ''),
                ])
                row[column] = value
            rows.append(row)

        print(f"Generated {len(rows)} flights")
        return rows

    def generate_passengers(self, flights: List[List[str]], users: List[List[str]]) -> List[List[str]]:
        """
        Generate passenger rows, sorted by flight ID

        Some flights get more passengers than seats when invalid rows are requested.
        """
        print("Generating passengers...")
        user_ids = [row[0] for row in users]
        rows = []
        for flight in sorted(flights, key=lambda row: row[0]):
            seats = int(flight[3]) if flight[3].isdigit() else 10
            count = random.randint(0, seats)
            if self._is_invalid():
                count = seats + random.randint(1, 3)

            for _ in range(count):
                user_id = random.choice(user_ids)
                if self._is_invalid():
                    user_id = 'NOBODY'
                rows.append([flight[0], user_id])

        print(f"Generated {len(rows)} passengers")
        return rows

    def generate_reservations(self, count: int, users: List[List[str]], year: int = 2023) -> List[List[str]]:
        """
        Generate reservation rows

        Args:
            count: Number of reservations to generate
            users: User rows the reservations belong to
            year: Year of the reservations

        Returns:
            List of rows, one list of column values per reservation
        """
        print(f"Generating {count} reservations...")
        user_ids = [row[0] for row in users]
        rows = []
        for i in range(count):
            hotel_id, hotel_name, stars, city_tax = random.choice(self.hotels)
            begin = self.faker.date_time_between(start_date=datetime(year, 1, 1),
                                                 end_date=datetime(year, 12, 1))
            end = begin + timedelta(days=random.randint(1, 20))

            row = [
                f"Book{i + 1:010d}",
                random.choice(user_ids),
                hotel_id,
                hotel_name,
                str(stars),
                str(city_tax),
                self.faker.city(),
                begin.strftime(DATE_FORMAT),
                end.strftime(DATE_FORMAT),
                str(random.randint(50, 400)),
                random.choice(['', '0', 'f', 'False', '1', 't', 'TRUE']),
                random.choice(['Basic room', 'Suite', 'Double room', '']),
                random.choice(['', '1', '2', '3', '4', '5']),
                self.faker.sentence() if random.random() < 0.3 else '',
            ]

            if self._is_invalid():
                column, value = random.choice([
                    (1, 'NOBODY'),
                    (4, '6'),
                    (8, (begin - timedelta(days=1)).strftime(DATE_FORMAT)),
                    (9, '0'),
                    (10, 'maybe'),
                    (12, '9'),
                ])
                row[column] = value
            rows.append(row)

        print(f"Generated {len(rows)} reservations")
        return rows

    def write_dataset(self, directory: str, num_users: int = 100, num_flights: int = 50,
                      num_reservations: int = 200) -> Dict[str, int]:
        """
        Generate a dataset and write its four files

        Args:
            directory: Output directory (created when missing)
            num_users: Number of users
            num_flights: Number of flights
            num_reservations: Number of reservations

        Returns:
            Number of rows written to each file
        """
        users = self.generate_users(num_users)
        flights = self.generate_flights(num_flights)
        passengers = self.generate_passengers(flights, users)
        reservations = self.generate_reservations(num_reservations, users)

        os.makedirs(directory, exist_ok=True)
        files = (
            (USERS_FILE, USERS_HEADER, users),
            (FLIGHTS_FILE, FLIGHTS_HEADER, flights),
            (PASSENGERS_FILE, PASSENGERS_HEADER, passengers),
            (RESERVATIONS_FILE, RESERVATIONS_HEADER, reservations),
        )
        for name, header, rows in files:
            with open(os.path.join(directory, name), 'w', encoding='utf-8', newline='') as stream:
                stream.write(header + '\n')
                for row in rows:
                    stream.write(_format_row(row) + '\n')

        print(f"Dataset written to {directory}")
        return {name: len(rows) for name, _, rows in files}


def main():
    """Main function for command-line usage"""
    import argparse

    parser = argparse.ArgumentParser(description='Generate a synthetic airline and hotel dataset')
    parser.add_argument('output_dir', help='Directory to write the dataset to')
    parser.add_argument('--users', type=int, default=1000, help='Number of users')
    parser.add_argument('--flights', type=int, default=200, help='Number of flights')
    parser.add_argument('--reservations', type=int, default=2000, help='Number of reservations')
    parser.add_argument('--invalid-ratio', type=float, default=0.0,
                        help='Fraction of malformed rows and overbooked flights')
    parser.add_argument('--seed', type=int, help='Random seed for reproducibility')

    args = parser.parse_args()

    generator = DataGenerator(seed=args.seed, invalid_ratio=args.invalid_ratio)
    generator.write_dataset(
        args.output_dir,
        num_users=args.users,
        num_flights=args.flights,
        num_reservations=args.reservations,
    )


if __name__ == '__main__':
    main()
