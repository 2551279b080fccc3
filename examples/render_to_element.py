#!/usr/bin/env python3
"""
Render program output into an XML/HTML document instead of the console.
"""

import os
import sys
import xml.etree.ElementTree as ET

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfinterp import ElementSink, Interpreter, InterpreterOptions, run_file, strip_code


def main():
    body = ET.Element('body')
    here = os.path.dirname(__file__)
    with open(os.path.join(here, 'hello.bf')) as f:
        code = strip_code(f.read())

    options = InterpreterOptions(
        output_sink=ElementSink(body),
        complete_callback=lambda out: print(f"done, {len(out)} characters"),
    )
    Interpreter(code, options).interpret()
    print(ET.tostring(body, encoding='unicode'))

    result = run_file(os.path.join(here, 'echo5.bf'), options=InterpreterOptions(stdin="hello"))
    print(repr(result.output))


if __name__ == "__main__":
    main()
