from typing import *

CFLAGS_FLAG = '-f'
SOURCE_FLAG = '-s'
COMPILER_FLAG = '-cc'
CFLAGS_FLAG_LOCATION = 2
MIN_ARGS = 4
DEFAULT_COMPILER = 'gcc'

class Variant:
    name: str
    prog: str
    makefile_name: str
    compiler_marker: Optional[str]
    prefix_match: bool

    def __init__(self, name: str, *, makefile_name: str,
                 compiler_marker: Optional[str], prefix_match: bool,
                 prog: str='makegen') -> None:
        self.name = name
        self.prog = prog
        self.makefile_name = makefile_name
        self.compiler_marker = compiler_marker
        self.prefix_match = prefix_match

    def matches(self, token: str, marker: str) -> bool:
        if self.prefix_match:
            return token.startswith(marker)
        return token == marker

    def usage(self) -> List[str]:
        line = f"{self.prog} {{executableName}} {CFLAGS_FLAG} {{CFLAGS}} {SOURCE_FLAG} {{SOURCE FILES}}"
        if self.compiler_marker is not None:
            line += f" [{self.compiler_marker} {{desired compiler}}]"
        return ["Usage:", line, "Fields in brackets are optional."]

    def __repr__(self) -> str:
        return f"Variant({self.name!r})"

CANONICAL = Variant('canonical', makefile_name='Makefile',
                    compiler_marker=COMPILER_FLAG, prefix_match=False)

# older makeGen: prefix matched markers, no compiler selection, lower case file
LEGACY = Variant('legacy', makefile_name='makefile',
                 compiler_marker=None, prefix_match=True)
