"""Test utilities for the html2jsx test suite."""

import textwrap


def jsx(text: str) -> str:
    """Dedent an expected JSX block and give it the converter's single trailing newline.

    Parameters
    ----------
    text : str
        Triple-quoted expected output; a leading newline is ignored.

    Returns
    -------
    str
        Dedented text ending with exactly one newline.

    """
    return textwrap.dedent(text).strip("\n") + "\n"
