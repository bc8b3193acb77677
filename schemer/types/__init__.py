from schemer.types.number import Number
from schemer.types.expression import (
    BooleanLiteral,
    BuiltinProcedure,
    Combination,
    Expression,
    FALSE,
    Identifier,
    NumberLiteral,
    Procedure,
    StringLiteral,
    TRUE,
    Void,
    VoidType,
    number,
)
from schemer.types.environment import Environment

__all__ = [
    "Number",
    "BooleanLiteral",
    "BuiltinProcedure",
    "Combination",
    "Expression",
    "FALSE",
    "Identifier",
    "NumberLiteral",
    "Procedure",
    "StringLiteral",
    "TRUE",
    "Void",
    "VoidType",
    "number",
    "Environment",
]
