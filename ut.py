#!/usr/bin/env python3
import sys
import unittest

from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / 'tests'))
import ut_invocation
import ut_makefile
import ut_generator
import ut_typecheck

def test(ut):
    suite = unittest.TestLoader().loadTestsFromModule(ut)
    result = unittest.TextTestRunner(failfast=True).run(suite)
    if len(result.errors) or len(result.failures) or len(result.unexpectedSuccesses):
        sys.exit(1)

if __name__ == '__main__':
    test(ut_invocation)
    test(ut_makefile)
    test(ut_generator)
    test(ut_typecheck)
