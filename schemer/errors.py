"""Error taxonomy for Schemer.

Every failure inside the reader or the evaluator is raised as a subclass of
SchemerError and propagates untouched to the caller of `evaluate`.
"""


class SchemerError(Exception):
    """ Base class for all Schemer errors"""
    pass


class SchemerSyntaxError(SchemerError):
    """ Raised by the parser for unbalanced parentheses"""


class SchemerInvalidSyntax(SchemerError):
    """ Raised when a special form or combination is malformed"""

    def __init__(self, message: str = "Invalid syntax"):
        super().__init__(message)


class SchemerUndefinedSymbol(SchemerError):
    """ Raised when an identifier is not bound in any active frame"""

    def __init__(self, name: str):
        super().__init__(f"Undefined symbol '{name}'")
        self.name = name


class SchemerArityError(SchemerError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""


class SchemerTypeError(SchemerError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""


class SchemerNonProcedureError(SchemerError):
    """ Raised when the operand of an application is not a procedure"""

    def __init__(self, operand: str):
        super().__init__(f"Attempt to apply non-procedure '{operand}'")
        self.operand = operand


class SchemerDivisionByZero(SchemerError):
    """ Raised when an exact integer is divided by exact zero"""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)
