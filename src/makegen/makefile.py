"""Rendering and writing of the generated makefile.

The layout is fixed: a header comment, the CC/CFLAGS/TARGETS variables,
the ``all`` and ``clean`` rules and a closing comment. Joined token lists
keep a trailing space after every token.
"""
import logging
import os

from pathlib import Path
from typing import *

from .errors import MakefileCreateError, MakefileExistsError
from .invocation import ParsedInvocation

AUTHOR = 'Juan Jovel'

log = logging.getLogger(__name__)

def _joined(tokens: Iterable[str]) -> str:
    return ''.join(f"{tok} " for tok in tokens)

def render_header(author: str=AUTHOR) -> str:
    return ("# Automatically generated makefile\n"
            f"# Generated using makeGen by {author}\n"
            "\n")

def render_rules(output_name: str) -> str:
    return ("\n\n"
            "all:\n"
            f"\t$(CC) $(CFLAGS) -o {output_name} $(TARGETS)\n"
            "\n"
            "clean:\n"
            f"\trm -f {output_name}\n"
            "\n"
            "# End automatically generated makeFile\n")

def render_makefile(parsed: ParsedInvocation, author: str=AUTHOR) -> str:
    text = render_header(author)
    text += f"CC={parsed.compiler}\n"
    text += f"CFLAGS={_joined(parsed.cflags)}\n"
    # rules open with the newline that ends this line
    text += f"TARGETS={_joined(parsed.sources)}"
    text += render_rules(parsed.output_name)
    return text

def write_makefile(parsed: ParsedInvocation, path: Union[str, Path], *, author: str=AUTHOR) -> Path:
    path = Path(path)
    # argv tokens may carry undecodable bytes, write them back unchanged
    try:
        data = os.fsencode(render_makefile(parsed, author))
    except UnicodeEncodeError as err:
        raise MakefileCreateError(f"Could not encode makefile for {path}: {err}") from err

    try:
        f = path.open('xb')
    except FileExistsError as err:
        raise MakefileExistsError(f"File exists: {path}") from err
    except OSError as err:
        raise MakefileCreateError(f"Could not create {path}: {err}") from err

    try:
        with f:
            f.write(data)
    except BaseException as err:
        log.warning("removing partially written %s", path)
        try:
            os.unlink(path)
        except OSError:
            log.warning("could not remove %s", path)
        if isinstance(err, OSError):
            raise MakefileCreateError(f"Could not write {path}: {err}") from err
        raise

    log.debug("wrote %d bytes to %s", len(data), path)
    return path
