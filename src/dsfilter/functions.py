"""
Built-in constraint functions.

    validate_version(agent.version, '>=7.0.0')
"""

from typing import Sequence

from dsfilter.boolexp.registry import FunctionRegistry
from dsfilter.boolexp.values import Value
from dsfilter.exceptions import FunctionArgumentError
from dsfilter.versioning import Version, VersionRange

VALIDATE_VERSION = "validate_version"


def validate_version(args: Sequence[Value]) -> bool:
    """
    Check a version against a version range.

    Args:
        args: [version, constraint], both strings

    Returns:
        True if the version satisfies the range

    Raises:
        FunctionArgumentError: Wrong number or type of arguments
        InvalidConstraintError: The range cannot be parsed
        InvalidVersionError: The version cannot be parsed
    """
    if len(args) != 2:
        raise FunctionArgumentError(
            f"{VALIDATE_VERSION}: invalid number of arguments, expecting 2"
        )

    version, constraint = args
    if not version.is_string:
        raise FunctionArgumentError("version should be a string")
    if not constraint.is_string:
        raise FunctionArgumentError("version constraint should be a string")

    version_range = VersionRange.parse(constraint.value)
    parsed = Version.parse(version.value)

    # reasons only explain a mismatch, they are not errors
    ok, _ = version_range.validate(parsed)
    return ok


BUILTINS = {
    VALIDATE_VERSION: validate_version,
}


def register_builtins(registry: FunctionRegistry) -> FunctionRegistry:
    """Register every built-in function on `registry`."""
    for name, function in BUILTINS.items():
        registry.register(name, function)
    return registry
