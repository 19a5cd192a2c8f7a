from oats.types.symbol import Symbol
from oats.types.char import Char
from oats.types.nil import EmptyList, EmptyListType
from oats.types.void import Void, VoidType
from oats.types.pair import Pair, iterate, make_list, list_length
from oats.types.procedure import Procedure, PrimitiveProcedure
from oats.types.predicates import is_truthy, is_equal, is_procedure
from oats.types.environment import Environment

__all__ = [
    "Symbol",
    "Char",
    "EmptyList",
    "EmptyListType",
    "Void",
    "VoidType",
    "Pair",
    "iterate",
    "make_list",
    "list_length",
    "Procedure",
    "PrimitiveProcedure",
    "is_truthy",
    "is_equal",
    "is_procedure",
    "Environment",
]
