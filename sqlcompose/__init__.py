"""sqlcompose: composable SQL statements with positional parameter binding."""

from sqlcompose import adapters, builder, driver, exceptions, parameters, typing, utils
from sqlcompose.__metadata__ import __version__
from sqlcompose._sql import SQLFactory
from sqlcompose.builder import BuildResult, Call, Delete, Insert, Raw, Replace, Select, Statement, Update
from sqlcompose.driver import DriverProtocol
from sqlcompose.exceptions import (
    DriverError,
    ExtraParameterError,
    MissingParameterError,
    ParameterError,
    SQLBuilderError,
    SQLComposeError,
    UnresolvedParameterError,
)
from sqlcompose.parameters import prepare
from sqlcompose.typing import ParameterValue, StatementParameters

sql = SQLFactory()

__all__ = (
    "BuildResult",
    "Call",
    "Delete",
    "DriverError",
    "DriverProtocol",
    "ExtraParameterError",
    "Insert",
    "MissingParameterError",
    "ParameterError",
    "ParameterValue",
    "Raw",
    "Replace",
    "SQLBuilderError",
    "SQLComposeError",
    "SQLFactory",
    "Select",
    "Statement",
    "Update",
    "UnresolvedParameterError",
    "__version__",
    "adapters",
    "builder",
    "driver",
    "exceptions",
    "parameters",
    "prepare",
    "sql",
    "typing",
    "utils",
)
