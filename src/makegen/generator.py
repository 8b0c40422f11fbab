import logging
import sys

from pathlib import Path
from typing import *

from .errors import MakeGenError, MakefileExistsError
from .invocation import ParsedInvocation, parse_invocation
from .makefile import AUTHOR, write_makefile
from .variant import CANONICAL, Variant

log = logging.getLogger(__name__)

class MakeGen:
    variant: Variant
    cwd: Path
    author: str
    out: TextIO

    def __init__(self, variant: Variant=CANONICAL, *, cwd: Union[str, Path]='',
                 author: str=AUTHOR, out: Optional[TextIO]=None) -> None:
        self.variant = variant
        self.cwd = Path(cwd)
        if not self.cwd.is_absolute():
            self.cwd = Path.cwd() / self.cwd
        self.author = author
        self.out = sys.stdout if out is None else out

    @property
    def makefile_path(self) -> Path:
        return self.cwd / self.variant.makefile_name

    def makefile_exists(self) -> bool:
        return self.makefile_path.exists()

    def parse(self, argv: Sequence[str]) -> ParsedInvocation:
        return parse_invocation(argv, self.variant)

    # raises MakeGenError subclasses, nothing is written unless parsing succeeds
    def generate(self, argv: Sequence[str]) -> Path:
        parsed = self.parse(argv)
        if self.makefile_exists():
            raise MakefileExistsError(f"File exists: {self.makefile_path}")
        return write_makefile(parsed, self.makefile_path, author=self.author)

    def print_usage(self) -> None:
        for line in self.variant.usage():
            print(line, file=self.out)

    def report(self, err: MakeGenError) -> None:
        for line in err.lines():
            print(line, file=self.out)
        if err.show_usage:
            self.print_usage()

    def run(self, argv: Sequence[str]) -> int:
        try:
            path = self.generate(argv)
        except MakeGenError as err:
            log.debug("makegen failed: %r", err)
            self.report(err)
            return err.exit_code
        log.debug("created %s", path)
        print("Successfully created makefile.", file=self.out)
        return 0
