"""Intermediate Representation for formatted documentation text.

This module defines the data structures that sit between the XML walk
and whatever presentation layer consumes the output. A formatted comment
is an ordered list of runs; a plain string is just those runs joined.
"""

from dataclasses import dataclass, replace
from enum import Enum, Flag, auto
from typing import Iterable


DEFAULT_LINE_BREAK = "\r\n"


class RunKind(Enum):
    """Kinds of output run.

    The formatter itself only ever produces TEXT, SPACE and LINE_BREAK.
    The remaining kinds come from symbol renderers and exist so that a
    presentation layer can colour them.
    """

    TEXT = "text"
    SPACE = "space"
    LINE_BREAK = "line_break"
    KEYWORD = "keyword"
    PUNCTUATION = "punctuation"
    NAMESPACE_NAME = "namespace_name"
    TYPE_NAME = "type_name"
    MEMBER_NAME = "member_name"
    PARAMETER_NAME = "parameter_name"

    @property
    def is_whitespace(self) -> bool:
        return self in (RunKind.SPACE, RunKind.LINE_BREAK)


@dataclass(frozen=True)
class Run:
    """One atomic unit of formatted output.

    Attributes:
        kind: What the run represents
        text: The literal rendering of the run
    """

    kind: RunKind
    text: str


SPACE = Run(RunKind.SPACE, " ")
LINE_BREAK = Run(RunKind.LINE_BREAK, DEFAULT_LINE_BREAK)


def text_run(text: str) -> Run:
    """Create a plain TEXT run."""
    return Run(RunKind.TEXT, text)


def runs_to_text(runs: Iterable[Run]) -> str:
    """Flatten a run sequence into a single string."""
    return "".join(run.text for run in runs)


# =============================================================================
# Display Format Configuration
# =============================================================================

class TypeQualification(Enum):
    """How much of a symbol's container chain to show."""

    NAME_ONLY = "name_only"
    NAME_AND_CONTAINING_TYPES = "name_and_containing_types"
    FULLY_QUALIFIED = "fully_qualified"


class MemberOptions(Flag):
    """Member display flags (combinable with |)."""

    NONE = 0
    INCLUDE_CONTAINING_TYPE = auto()
    INCLUDE_PARAMETERS = auto()
    INCLUDE_EXPLICIT_INTERFACE = auto()


@dataclass(frozen=True)
class DisplayFormat:
    """Options controlling how a resolved symbol is rendered.

    Attributes:
        qualification: Qualification level for type and namespace names
        member_options: Flags for members (methods, properties, ...)
    """

    qualification: TypeQualification = TypeQualification.NAME_AND_CONTAINING_TYPES
    member_options: MemberOptions = MemberOptions.INCLUDE_CONTAINING_TYPE

    @classmethod
    def default(cls) -> "DisplayFormat":
        return cls()

    @property
    def include_parameters(self) -> bool:
        return MemberOptions.INCLUDE_PARAMETERS in self.member_options

    @property
    def include_containing_type(self) -> bool:
        return MemberOptions.INCLUDE_CONTAINING_TYPE in self.member_options

    def with_member_options(self, options: MemberOptions) -> "DisplayFormat":
        """Return a copy whose member options are replaced by ``options``."""
        return replace(self, member_options=options)


CONSTRUCTOR_MEMBER_OPTIONS = (
    MemberOptions.INCLUDE_PARAMETERS | MemberOptions.INCLUDE_EXPLICIT_INTERFACE
)
