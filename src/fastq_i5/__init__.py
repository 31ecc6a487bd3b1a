__version__ = "0.1.0"

from .complement import complement_base, reverse_complement, reverse_complement_in_place
from .header import (
    FastqFormatError,
    MalformedHeaderError,
    MissingFieldDelimiterError,
    MissingMarkerError,
    MissingSubfieldDelimiterError,
    MissingTerminatorError,
    rewrite_header,
)
from .stream import FastqI5Stream, TruncatedRecordError, buffered_streams, read_line
