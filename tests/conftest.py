# conftest.py - shared fixtures
import textwrap

import pytest


@pytest.fixture
def foo_doc():
    return "function foo() {\n  return 1;\n}\n"


@pytest.fixture
def twin_buttons_doc():
    """Two identical buttons far enough apart that a hint can only be near one."""
    return textwrap.dedent("""\
        function Header() {
          return (
            <button className="btn">Save</button>
          );
        }

        const spacer1 = 1;
        const spacer2 = 2;
        const spacer3 = 3;
        const spacer4 = 4;
        const spacer5 = 5;
        const spacer6 = 6;

        function Footer() {
          return (
            <button className="btn">Save</button>
          );
        }
    """)
