"""
Tests for built-in constraint functions.
"""

import pytest

from dsfilter.boolexp import FunctionRegistry, Value
from dsfilter.exceptions import (
    DuplicateFunctionError,
    FunctionArgumentError,
    InvalidConstraintError,
    InvalidVersionError,
)
from dsfilter.functions import VALIDATE_VERSION, register_builtins, validate_version


def args(*values):
    return [Value.of(v) for v in values]


class TestValidateVersion:
    """validate_version(version, constraint)"""

    def test_match(self):
        assert validate_version(args("7.6.0", ">=7.0.0")) is True

    def test_no_match(self):
        assert validate_version(args("6.8.0", ">=7.0.0")) is False

    @pytest.mark.parametrize("values", [(), ("7.6.0",), ("7.6.0", ">=7", "extra")])
    def test_arity(self, values):
        with pytest.raises(FunctionArgumentError) as exc:
            validate_version(args(*values))
        assert str(exc.value) == "validate_version: invalid number of arguments, expecting 2"

    def test_version_not_a_string(self):
        with pytest.raises(FunctionArgumentError) as exc:
            validate_version(args(7, ">=7.0.0"))
        assert str(exc.value) == "version should be a string"

    def test_constraint_not_a_string(self):
        with pytest.raises(FunctionArgumentError) as exc:
            validate_version(args("7.6.0", True))
        assert str(exc.value) == "version constraint should be a string"

    def test_invalid_constraint(self):
        with pytest.raises(InvalidConstraintError) as exc:
            validate_version(args("7.6.0", "newer than 7"))
        assert str(exc.value) == "constraint 'newer than 7' is invalid"

    def test_invalid_version(self):
        with pytest.raises(InvalidVersionError) as exc:
            validate_version(args("seven", ">=7.0.0"))
        assert str(exc.value) == "version 'seven' is invalid"

    def test_constraint_checked_first(self):
        with pytest.raises(InvalidConstraintError):
            validate_version(args("seven", "newer than 7"))


class TestRegisterBuiltins:

    def test_registers_validate_version(self):
        registry = register_builtins(FunctionRegistry())
        assert registry.get(VALIDATE_VERSION) is validate_version

    def test_twice_is_rejected(self):
        registry = register_builtins(FunctionRegistry())
        with pytest.raises(DuplicateFunctionError):
            register_builtins(registry)
