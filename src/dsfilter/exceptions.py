# -*- encoding: utf-8 -*-
"""
dsfilter Exceptions.

Every error raised by the filter derives from FilterError. Subclasses map
to the four failure kinds of a filter pass: malformed constraints,
expression errors, evaluation context construction and tree mutation.
"""

from typing import Optional


class FilterError(Exception):
    """
    Base exception for all dsfilter errors.

    Attributes:
        constraint: Constraint expression being evaluated, when known
        datasource: Identifier of the datasource owning the constraint
    """

    def __init__(
        self,
        message: str,
        constraint: Optional[str] = None,
        datasource: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.constraint = constraint
        self.datasource = datasource

    def annotate(
        self,
        constraint: Optional[str] = None,
        datasource: Optional[str] = None,
    ) -> "FilterError":
        """Attach constraint and datasource details unless already set."""
        if self.constraint is None:
            self.constraint = constraint
        if self.datasource is None:
            self.datasource = datasource
        return self

    def __str__(self) -> str:
        text = self.message
        if self.constraint is not None:
            text += f" (constraint '{self.constraint}')"
        if self.datasource is not None:
            text += f" (datasource '{self.datasource}')"
        return text

    def to_dict(self) -> dict:
        """Convert exception to dictionary representation."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "constraint": self.constraint,
            "datasource": self.datasource,
        }


class ConstraintTypeError(FilterError):
    """Raised when a datasource's constraints are not a list of strings."""
    pass


class TreeError(FilterError):
    """Raised when the configuration tree cannot be built or mutated."""
    pass


# --- Expression errors ---


class ExpressionError(FilterError):
    """Raised when a constraint expression cannot be evaluated."""
    pass


class ExpressionSyntaxError(ExpressionError):
    """Raised when a constraint expression cannot be parsed."""
    pass


class UnknownVariableError(ExpressionError):
    """Raised when an expression references a variable with no value."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"unknown variable '{name}'", **kwargs)
        self.name = name


class UnknownFunctionError(ExpressionError):
    """Raised when an expression calls a function that is not registered."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"unknown function '{name}'", **kwargs)
        self.name = name


class ExpressionTypeError(ExpressionError):
    """Raised when operand or result types do not fit the operation."""
    pass


class FunctionCallError(ExpressionError):
    """Raised when a registered function fails."""
    pass


class FunctionArgumentError(FunctionCallError):
    """Raised when a function receives the wrong number or type of arguments."""
    pass


class InvalidVersionError(FunctionCallError):
    """Raised when a string is not a valid semantic version."""

    def __init__(self, version: str, **kwargs):
        super().__init__(f"version '{version}' is invalid", **kwargs)
        self.version = version


class InvalidConstraintError(FunctionCallError):
    """Raised when a string is not a valid semantic version range."""

    def __init__(self, version_range: str, **kwargs):
        super().__init__(f"constraint '{version_range}' is invalid", **kwargs)
        self.version_range = version_range


# --- Evaluation context errors ---


class ContextError(FilterError):
    """Raised when the evaluation context cannot be built."""
    pass


class HostFactsError(ContextError):
    """Raised when host or agent facts cannot be gathered."""
    pass


class DuplicateFunctionError(ContextError):
    """Raised when a function name is registered twice."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"function '{name}' is already registered", **kwargs)
        self.name = name
