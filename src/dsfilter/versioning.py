# -*- encoding: utf-8 -*-
"""
Semantic versions and version ranges for the validate_version function.

Version strings are read leniently: a leading "v" is accepted and missing
minor or patch numbers default to 0 ("7" == "7.0.0").

Range syntax:

    >=6.8.0, <8          all comparisons of a group must hold
    ^7.2 || ~6.8.1       any group may hold
    7.x                  wildcard, same as =7
    6.8 - 7.2.1          hyphen range, same as >=6.8 <=7.2.1

Operators: = != > < >= (=>) <= (=<) ~ (~>) ^. A version carrying a
prerelease tag only satisfies ordering operators whose bound carries one
too, so 8.0.0-SNAPSHOT does not satisfy ">=7.0.0".
"""

import functools
import re
from dataclasses import dataclass
from typing import Optional

from lark import Lark, Transformer
from lark.exceptions import LarkError

from dsfilter.exceptions import InvalidConstraintError, InvalidVersionError


_VERSION_RE = re.compile(
    r"^v?(?P<major>\d+)(?:\.(?P<minor>\d+))?(?:\.(?P<patch>\d+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)

_WILDCARDS = ("x", "X", "*")


def _compare_prerelease(left: str, right: str) -> int:
    """Order prerelease tags by SemVer 2.0 precedence; empty sorts last."""
    if left == right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    for a, b in zip(left.split("."), right.split(".")):
        if a == b:
            continue
        a_num, b_num = a.isdigit(), b.isdigit()
        if a_num and b_num:
            return -1 if int(a) < int(b) else 1
        # numeric identifiers sort before alphanumeric ones
        if a_num != b_num:
            return -1 if a_num else 1
        return -1 if a < b else 1

    return -1 if len(left.split(".")) < len(right.split(".")) else 1


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A semantic version. Build metadata is kept but never compared."""
    major: int
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    metadata: str = ""

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a version string.

        Raises:
            InvalidVersionError: If `text` is not a version
        """
        match = _VERSION_RE.match(text.strip())
        if not match:
            raise InvalidVersionError(text)
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor") or 0),
            patch=int(match.group("patch") or 0),
            prerelease=match.group("prerelease") or "",
            metadata=match.group("metadata") or "",
        )

    def compare(self, other: "Version") -> int:
        """Return -1, 0 or 1 as self sorts before, with or after `other`."""
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if mine != theirs:
            return -1 if mine < theirs else 1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "Version") -> bool:
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.metadata:
            text += f"+{self.metadata}"
        return text


# Lark grammar for version ranges
RANGE_GRAMMAR = r'''
start: group ("||" group)*

group: term (","? term)*

?term: hyphen
     | comparison

hyphen: BOUND "-" BOUND
comparison: OP? BOUND

OP: /!=|>=|=>|<=|=<|~>|>|<|=|~|\^/
BOUND: /v?(?:\d+|[xX*])(?:\.(?:\d+|[xX*])){0,2}(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?/

%import common.WS
%ignore WS
'''

_OP_ALIASES = {"=>": ">=", "=<": "<=", "~>": "~"}


@dataclass(frozen=True)
class Bound:
    """
    The version side of a comparison.

    Attributes:
        version: Bound with wildcard parts set to 0
        wildcard: Index of the first wildcard part (0 major, 1 minor,
            2 patch), None for an exact bound
    """
    version: Version
    wildcard: Optional[int] = None

    @classmethod
    def parse(cls, text: str) -> "Bound":
        core, sep, tail = text.lstrip("v").partition("-")
        if not sep:
            core, sep, tail = core.partition("+")
        parts = core.split(".")

        wildcard = None
        for index, part in enumerate(parts):
            if part in _WILDCARDS:
                wildcard = index
                break
        # a missing minor widens the bound like a wildcard; "1" means "1.x"
        if wildcard is None and len(parts) == 1:
            wildcard = 1

        numbers = parts[:wildcard] if wildcard is not None else parts
        if any(p in _WILDCARDS for p in numbers):
            raise ValueError(text)
        base = ".".join(numbers + ["0"] * (3 - len(numbers)))
        if wildcard is None and sep:
            base += sep + tail
        return cls(version=Version.parse(base), wildcard=wildcard)

    def prefix(self, version: Version) -> tuple[int, ...]:
        """The parts of `version` this bound pins, up to its wildcard."""
        return (version.major, version.minor, version.patch)[:self.wildcard]


@dataclass(frozen=True)
class Comparison:
    """Represents: op bound, e.g. >=7.0.0"""
    op: str
    bound: Bound
    text: str

    def matches(self, version: Version) -> bool:
        bound = self.bound.version
        if self.op not in ("=", "!=") and version.prerelease and not bound.prerelease:
            return False

        if self.op in ("=", "!="):
            if self.bound.wildcard is None:
                equal = version == bound
            else:
                equal = self.bound.prefix(version) == self.bound.prefix(bound)
            return equal if self.op == "=" else not equal
        if self.op == ">":
            if self.bound.wildcard is None:
                return version > bound
            return self.bound.prefix(version) > self.bound.prefix(bound)
        if self.op == "<":
            return version < bound
        if self.op == ">=":
            return version >= bound
        if self.op == "<=":
            if self.bound.wildcard is None:
                return version <= bound
            return self.bound.prefix(version) <= self.bound.prefix(bound)
        if self.op == "~":
            if version < bound or version.major != bound.major:
                return False
            return self.bound.wildcard in (0, 1) or version.minor == bound.minor
        if self.op == "^":
            return version >= bound and version.major == bound.major
        raise ValueError(f"unknown operator {self.op}")

    def __str__(self) -> str:
        return self.text


class _RangeTransformer(Transformer):

    def BOUND(self, token):
        return str(token)

    def OP(self, token):
        op = str(token)
        return _OP_ALIASES.get(op, op)

    def comparison(self, items):
        op = items[0] if len(items) > 1 else "="
        bound = items[-1]
        text = f"{op}{bound}"
        return [Comparison(op=op, bound=Bound.parse(bound), text=text)]

    def hyphen(self, items):
        low, high = items
        return [
            Comparison(op=">=", bound=Bound.parse(low), text=f">={low}"),
            Comparison(op="<=", bound=Bound.parse(high), text=f"<={high}"),
        ]

    def group(self, items):
        return [c for term in items for c in term]

    def start(self, items):
        return items


@functools.lru_cache(maxsize=None)
def _range_parser() -> Lark:
    return Lark(RANGE_GRAMMAR, parser='lalr', transformer=_RangeTransformer())


class VersionRange:
    """
    A parsed version range: alternatives of comparison groups.

    Example:
        VersionRange.parse(">=6.8.0, <8 || ^9").check(Version.parse("7.1.0"))
    """

    def __init__(self, text: str, groups: list[list[Comparison]]):
        self.text = text
        self.groups = groups

    @classmethod
    def parse(cls, text: str) -> "VersionRange":
        """
        Parse a range string.

        Raises:
            InvalidConstraintError: If `text` is not a valid range
        """
        try:
            groups = _range_parser().parse(text)
        except (LarkError, InvalidVersionError, ValueError) as e:
            raise InvalidConstraintError(text) from e
        return cls(text, groups)

    def validate(self, version: Version) -> tuple[bool, list[str]]:
        """
        Check `version` against the range.

        Returns:
            (True, []) when some group holds, otherwise (False, reasons)
            with one reason per failing comparison
        """
        reasons: list[str] = []
        for group in self.groups:
            failed = [c for c in group if not c.matches(version)]
            if not failed:
                return True, []
            reasons.extend(f"{version} does not satisfy {c}" for c in failed)
        return False, reasons

    def check(self, version: Version) -> bool:
        return self.validate(version)[0]

    def __str__(self) -> str:
        return self.text
