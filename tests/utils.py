""" Functions shared by test files. """

from textwrap import dedent


def strip_leading_spaces(txt):
    """
    Removes leading blank lines and de-indents text so that test data can be
    indented to the code, making it more readable.
    """
    return dedent(txt).lstrip()


def fastq_bytes(txt):
    """
    Indented FASTQ text as bytes, as it would be read from a file.
    """
    return strip_leading_spaces(txt).encode()
