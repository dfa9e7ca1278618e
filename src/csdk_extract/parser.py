"""Parse the compile line out of a make trace.

The SDK compiles every translation unit with the same command line, so the
first ``clang -c`` line of the trace carries all the definitions and flags.
Tokens are classified in this order (first match wins)::

    -D...   preprocessor definition -> .defines
    -I...   include path            -> dropped
    -...    any other option        -> .cflags
    other   compiler, sources, objs -> dropped

Two emission policies exist.  ``RAW`` keeps every definition and option;
``FILTERED`` drops the entries listed in :mod:`csdk_extract.filters` and
ends the flags with ``-Wno-unused-command-line-argument``.  The policy is
chosen by :data:`EMIT_MODE`; reference files are generated with the same one.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from csdk_extract.errors import ExtractError
from csdk_extract.filters import FILTERED_CFLAGS, FILTERED_DEFINES, UNUSED_ARGUMENT_FLAG

COMPILE_MARKER = "clang -c"


class EmitMode(enum.Enum):
    RAW = "raw"
    FILTERED = "filtered"


EMIT_MODE = EmitMode.RAW


class TokenKind(enum.Enum):
    DEFINE = "define"
    INCLUDE = "include"
    CFLAG = "cflag"
    OTHER = "other"


@dataclass(frozen=True)
class DefineEntry:
    """A ``-D<name>[=<value>]`` definition."""

    name: str
    value: Optional[str] = None

    def render(self) -> str:
        """Return the ``#define`` line (without newline).

        An empty value (``-DFOO=``) keeps the separating space.
        """
        if self.value is None:
            return f"#define {self.name}"
        return f"#define {self.name} {self.value}"


@dataclass
class BuildFlags:
    """Definitions and flags extracted from one compile line, in command order."""

    defines: list[DefineEntry] = field(default_factory=list)
    cflags: list[str] = field(default_factory=list)


def find_compile_line(text: str) -> str | None:
    """Return the first line of *text* containing ``clang -c``, or ``None``.

    Lines end at LF only (one trailing CR is dropped); form feeds and other
    Unicode line separators stay inside the line as ordinary whitespace.
    """
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if COMPILE_MARKER in line:
            return line
    return None


def classify_token(token: str) -> TokenKind:
    """Classify a single whitespace-separated token of the compile line."""
    if token.startswith("-D"):
        return TokenKind.DEFINE
    if token.startswith("-I"):
        return TokenKind.INCLUDE
    if token.startswith("-"):
        return TokenKind.CFLAG
    return TokenKind.OTHER


def define_name(token: str) -> str:
    """Return the macro name of a ``-D`` token (the part before any ``=``)."""
    return token[len("-D") :].split("=", 1)[0]


def parse_define(token: str) -> DefineEntry:
    """Parse a ``-D`` token.

    Splits on every ``=``; a token with more than one ``=`` (for example
    ``-DFOO=BAR=BAZ``) is rejected.

    Raises:
        ExtractError: more than two ``=``-separated segments.
    """
    parts = token[len("-D") :].split("=")
    if len(parts) == 1:
        return DefineEntry(parts[0])
    if len(parts) == 2:
        return DefineEntry(parts[0], parts[1])
    raise ExtractError(f"Unexpected format for define: {token}")


def parse_compile_line(line: str, mode: EmitMode = EMIT_MODE) -> BuildFlags:
    """Split *line* on whitespace and sort its tokens into defines and cflags."""
    flags = BuildFlags()
    filtered = mode is EmitMode.FILTERED

    for token in line.split():
        kind = classify_token(token)
        if kind is TokenKind.DEFINE:
            # Suppressed names are dropped before their shape is checked
            if filtered and define_name(token) in FILTERED_DEFINES:
                continue
            flags.defines.append(parse_define(token))
        elif kind is TokenKind.CFLAG:
            if filtered and token in FILTERED_CFLAGS:
                continue
            flags.cflags.append(token)

    if filtered:
        flags.cflags.append(UNUSED_ARGUMENT_FLAG)
    return flags


def extract_build_flags(text: str, mode: EmitMode = EMIT_MODE) -> BuildFlags | None:
    """Extract flags from a full trace; ``None`` when it has no compile line."""
    line = find_compile_line(text)
    if line is None:
        return None
    return parse_compile_line(line, mode)
