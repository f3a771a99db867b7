#!.venv/bin/python

# The shebang may point towards a venv, but CI executes python -m runtest

import logging
import os
import sys
import traceback
import unittest


if __name__ == "__main__":
    stream = sys.stdout

    def println(s: str = "") -> None:
        if s:
            stream.write(s)
        stream.write("\n")
        stream.flush()

    def heading(s: str) -> None:
        println()
        println(s)
        println("=" * len(s))

    heading("1. Setup")
    println(f"Python: {sys.executable}")
    println(f"Prefix: {sys.prefix}")
    println(f"Current Directory: {os.getcwd()}")

    # CHROMAKIT_DEBUG=1 shows table construction and solver diagnostics
    if os.environ.get("CHROMAKIT_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    heading("2. Unit Testing")
    try:
        suite = unittest.defaultTestLoader.discover("test")
        result = unittest.TextTestRunner(stream=stream, verbosity=2).run(suite)
        sys.exit(not result.wasSuccessful())
    except Exception as x:
        trace = traceback.format_exception(x)
        println("".join(trace))
        sys.exit(1)
