"""
Loader for users.csv
"""
from typing import Optional

from database import AccountStatus, Database, Sex, User
from database.types import (
    country_code_from_string, date_and_time_from_string, date_and_time_get_date,
    date_from_string, validate_email,
)

from .error_output import DatasetErrorOutput
from .input import DatasetInput
from .parser import DatasetGrammar, FixedNGrammar, parse_dataset


class _UsersLoaderContext:
    def __init__(self, database: Database, errors: DatasetErrorOutput):
        self.database = database
        self.errors = errors
        self.current_line = ""
        self.user = User()


def _require_text(token: str, index: int) -> str:
    if not token:
        raise ValueError(f"Empty column {index}")
    return token


def _parse_id(context: _UsersLoaderContext, token: str, index: int) -> None:
    context.user.id = _require_text(token, index)


def _parse_name(context: _UsersLoaderContext, token: str, index: int) -> None:
    context.user.name = _require_text(token, index)


def _parse_email(context: _UsersLoaderContext, token: str, index: int) -> None:
    validate_email(token)


def _parse_not_empty(context: _UsersLoaderContext, token: str, index: int) -> None:
    _require_text(token, index)


def _parse_birth_date(context: _UsersLoaderContext, token: str, index: int) -> None:
    context.user.birth_date = date_from_string(token)


def _parse_sex(context: _UsersLoaderContext, token: str, index: int) -> None:
    context.user.sex = Sex.from_string(token)


def _parse_passport(context: _UsersLoaderContext, token: str, index: int) -> None:
    context.user.passport = _require_text(token, index)


def _parse_country_code(context: _UsersLoaderContext, token: str, index: int) -> None:
    context.user.country_code = country_code_from_string(token)


def _parse_account_creation(context: _UsersLoaderContext, token: str, index: int) -> None:
    creation = date_and_time_from_string(token)
    if context.user.birth_date > date_and_time_get_date(creation):
        raise ValueError("Account created before the user was born")
    context.user.account_creation_date = creation


def _parse_account_status(context: _UsersLoaderContext, token: str, index: int) -> None:
    context.user.account_status = AccountStatus.from_string(token)


USERS_GRAMMAR_COLUMNS = (
    _parse_id,
    _parse_name,
    _parse_email,
    _parse_not_empty,  # phone number
    _parse_birth_date,
    _parse_sex,
    _parse_passport,
    _parse_country_code,
    _parse_not_empty,  # address
    _parse_account_creation,
    _parse_not_empty,  # pay method
    _parse_account_status,
)


def _before_line(context: _UsersLoaderContext, line: str) -> None:
    context.current_line = line
    context.user.birth_date = None
    context.user.account_creation_date = None


def _after_line(context: _UsersLoaderContext, error: Optional[ValueError]) -> None:
    if error is None:
        context.database.add_user(context.user)
    else:
        context.errors.report_user_error(context.current_line)


USERS_GRAMMAR = DatasetGrammar(
    line_grammar=FixedNGrammar(";", USERS_GRAMMAR_COLUMNS),
    before_line=_before_line,
    after_line=_after_line,
)


def load_users(database: Database, dataset_input: DatasetInput, errors: DatasetErrorOutput) -> None:
    """Parse users.csv into the database, reporting rejected rows"""
    parse_dataset(dataset_input.users, USERS_GRAMMAR, _UsersLoaderContext(database, errors))
