import logging

from dataclasses import dataclass
from typing import *

from .errors import MissingSourcesError, UsageError
from .variant import (CANONICAL, CFLAGS_FLAG, CFLAGS_FLAG_LOCATION,
                      DEFAULT_COMPILER, MIN_ARGS, SOURCE_FLAG, Variant)

log = logging.getLogger(__name__)

class Markers(NamedTuple):
    sources: Optional[int]
    compiler: Optional[int]

@dataclass(frozen=True)
class ParsedInvocation:
    output_name: str
    cflags: Tuple[str, ...]
    sources: Tuple[str, ...]
    compiler: str=DEFAULT_COMPILER

def validate_invocation(argv: Sequence[str], variant: Variant=CANONICAL) -> None:
    if len(argv) < MIN_ARGS:
        raise UsageError(exit_code=0)

    # argv[2] is always the flags marker for a valid invocation
    if not variant.matches(argv[CFLAGS_FLAG_LOCATION], CFLAGS_FLAG):
        raise UsageError("Error: No flags found.")

def find_markers(argv: Sequence[str], variant: Variant=CANONICAL) -> Markers:
    sources: Optional[int] = None
    compiler: Optional[int] = None
    for i, arg in enumerate(argv):
        if sources is None and variant.matches(arg, SOURCE_FLAG):
            sources = i
        # a compiler marker only counts once the sources marker is seen
        if (variant.compiler_marker is not None and sources is not None
                and compiler is None and variant.matches(arg, variant.compiler_marker)):
            compiler = i
    return Markers(sources, compiler)

def parse_invocation(argv: Sequence[str], variant: Variant=CANONICAL) -> ParsedInvocation:
    args = tuple(argv)
    validate_invocation(args, variant)
    markers = find_markers(args, variant)
    if markers.sources is None:
        raise MissingSourcesError(SOURCE_FLAG)

    compiler = DEFAULT_COMPILER
    sources_end = len(args)
    if markers.compiler is not None:
        sources_end = markers.compiler
        if markers.compiler + 1 < len(args):
            compiler = args[markers.compiler + 1]

    parsed = ParsedInvocation(
        output_name=args[1],
        cflags=args[CFLAGS_FLAG_LOCATION + 1:markers.sources],
        sources=args[markers.sources + 1:sources_end],
        compiler=compiler)
    log.debug("parsed %r as %r", args, parsed)
    return parsed
