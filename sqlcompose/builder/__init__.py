"""Statement builders.

Each builder is a mutable, chainable description of one statement. ``build()``
compiles it once into a :class:`BuildResult` holding positional SQL text and
its ordered parameters.
"""

from sqlcompose.builder._base import BuildResult, Raw, Statement
from sqlcompose.builder._call import Call
from sqlcompose.builder._delete import Delete
from sqlcompose.builder._insert import Insert, InsertCore, Replace
from sqlcompose.builder._select import Select
from sqlcompose.builder._union import UnionAdapter
from sqlcompose.builder._update import Update

__all__ = (
    "BuildResult",
    "Call",
    "Delete",
    "Insert",
    "InsertCore",
    "Raw",
    "Replace",
    "Select",
    "Statement",
    "UnionAdapter",
    "Update",
)
