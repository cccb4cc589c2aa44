"""Clause components and the mixins exposing them on statements."""

from sqlcompose.builder.mixins._bind import BindParametersMixin
from sqlcompose.builder.mixins._clause import Clause, Fragment
from sqlcompose.builder.mixins._flags import DistinctMixin, FlagClause, IgnoreMixin
from sqlcompose.builder.mixins._group_by import GroupByClause, GroupByClauseMixin
from sqlcompose.builder.mixins._join import JOIN_TYPES, Join, JoinClause, JoinClauseMixin
from sqlcompose.builder.mixins._limit_offset import LimitClause, LimitClauseMixin, OffsetClause, OffsetClauseMixin
from sqlcompose.builder.mixins._order_by import OrderByClause, OrderByClauseMixin
from sqlcompose.builder.mixins._table import TableClause, TableClauseMixin
from sqlcompose.builder.mixins._where import ConditionClause, HavingClauseMixin, WhereClauseMixin

__all__ = (
    "JOIN_TYPES",
    "BindParametersMixin",
    "Clause",
    "ConditionClause",
    "DistinctMixin",
    "FlagClause",
    "Fragment",
    "GroupByClause",
    "GroupByClauseMixin",
    "IgnoreMixin",
    "Join",
    "JoinClause",
    "JoinClauseMixin",
    "LimitClause",
    "LimitClauseMixin",
    "OffsetClause",
    "OffsetClauseMixin",
    "OrderByClause",
    "OrderByClauseMixin",
    "TableClause",
    "TableClauseMixin",
    "WhereClauseMixin",
)
