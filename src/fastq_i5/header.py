"""
Rewrites the i5 (Index2 / P5) barcode of Illumina FASTQ headers, which
end with ":<i7>+<i5>\\n", to its reverse complement.
"""

from fastq_i5.complement import reverse_complement_in_place


class FastqFormatError(ValueError):
    """Input is not FASTQ in the expected form"""


class MalformedHeaderError(FastqFormatError):
    """Header line cannot be parsed"""


class MissingMarkerError(MalformedHeaderError):
    """Header does not begin with '@'"""


class MissingTerminatorError(MalformedHeaderError):
    """Header does not end with a newline"""


class MissingFieldDelimiterError(MalformedHeaderError):
    """No ':' in the header"""


class MissingSubfieldDelimiterError(MalformedHeaderError):
    """No '+' after the last ':' in the header"""


def rewrite_header(line: bytearray) -> tuple[int, int]:
    """
    Reverse-complements the i5 barcode of the header `line` in place and
    returns the `(start, end)` of the barcode within `line`.

    The barcode is everything after the first '+' which follows the last
    ':', up to the trailing newline, and may be empty. Searching for the
    last ':' allows for run identifiers such as
    "@inst:run:flow:lane:tile:x:y" in front of the index field. The line
    is left unchanged if any check fails.
    """

    # ord("@") == 64
    if not line or line[0] != 64:
        msg = "invalid FASTQ header: does not start with '@'"
        raise MissingMarkerError(msg)

    # ord("\n") == 10
    if line[-1] != 10:
        msg = "invalid FASTQ header: missing trailing newline"
        raise MissingTerminatorError(msg)

    colon = line.rfind(b":")
    if colon == -1:
        msg = "invalid FASTQ header: missing ':' before index field"
        raise MissingFieldDelimiterError(msg)

    plus = line.find(b"+", colon + 1)
    if plus == -1:
        msg = "invalid FASTQ header: missing '+' in index field"
        raise MissingSubfieldDelimiterError(msg)

    start = plus + 1
    end = len(line) - 1  # Exclude the newline
    reverse_complement_in_place(line, start, end)
    return start, end
