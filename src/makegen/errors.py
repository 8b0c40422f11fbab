from typing import *

class MakeGenError(Exception):
    exit_code: int = 1
    show_usage: bool = False

    def lines(self) -> List[str]:
        return [str(self)]

class UsageError(MakeGenError):
    show_usage = True

    def __init__(self, message: str='', *, exit_code: int=1) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def lines(self) -> List[str]:
        # too few arguments only shows usage
        if not str(self):
            return []
        return ["Invalid invocation.", str(self)]

class MissingSourcesError(MakeGenError):
    show_usage = True

    def __init__(self, marker: str) -> None:
        super().__init__(f'Error: No source files flag "{marker}" found.')
        self.marker = marker

    def lines(self) -> List[str]:
        return ["Invalid invocation.", str(self)]

class MakefileExistsError(MakeGenError, FileExistsError):
    def lines(self) -> List[str]:
        return ["Unable to create makefile:",
                "makeFile already exists in this directory."]

class MakefileCreateError(MakeGenError, OSError):
    def lines(self) -> List[str]:
        return ["FATAL ERROR:",
                "Unable to create makefile:",
                "makeFile could not be created."]
