"""Driver boundary: the execution contract adapters implement."""

from sqlcompose.driver._common import DriverProtocol, ExecutableStatement, prepare_statement

__all__ = ("DriverProtocol", "ExecutableStatement", "prepare_statement")
