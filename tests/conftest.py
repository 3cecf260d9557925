"""
Shared test fixtures for the cttt-parser test suite.
"""

import pytest


@pytest.fixture
def block_comment_source():
    """Source with directives inside two multi-line block comments."""
    return (
        "\n"
        "            /**\n"
        "             * @cttt.named(123)\n"
        "             */\n"
        "            x = 123;\n"
        "            /**\n"
        "             * @cttt.noop()\n"
        "             */"
    )


@pytest.fixture
def mixed_source():
    """Source mixing commanded directives, a bare marker and plain code."""
    return (
        "// @cttt.named(123)\n"
        "// @cttt.named(2)\n"
        "x +=1;\n"
        "// @cttt.change(3,4,5)\n"
        "// @cttt\n"
        "// @cttt.change(1)"
    )
