from .errors import (MakeGenError, MakefileCreateError, MakefileExistsError,
                     MissingSourcesError, UsageError)
from .generator import MakeGen
from .invocation import (Markers, ParsedInvocation, find_markers,
                         parse_invocation, validate_invocation)
from .makefile import AUTHOR, render_makefile, write_makefile
from .variant import CANONICAL, LEGACY, Variant

from typing import *

__all__ = [
    'AUTHOR', 'CANONICAL', 'LEGACY', 'MakeGen', 'MakeGenError',
    'MakefileCreateError', 'MakefileExistsError', 'Markers',
    'MissingSourcesError', 'ParsedInvocation', 'UsageError', 'Variant',
    'find_markers', 'legacy_main', 'main', 'parse_invocation',
    'render_makefile', 'validate_invocation', 'write_makefile',
]

def main(argv: Optional[Sequence[str]]=None) -> None:
    import sys
    if argv is None:
        argv = sys.argv
    sys.exit(MakeGen(CANONICAL).run(argv))

def legacy_main(argv: Optional[Sequence[str]]=None) -> None:
    import sys
    if argv is None:
        argv = sys.argv
    sys.exit(MakeGen(LEGACY).run(argv))
