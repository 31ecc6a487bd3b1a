import io
import logging
from contextlib import contextmanager

from fastq_i5.header import FastqFormatError, rewrite_header

# 64 kB buffers for input and output
IO_BUFFER_BYTES = 64 * 1024

LINES_PER_RECORD = 4


class TruncatedRecordError(FastqFormatError):
    """Input ended part way through a FASTQ record"""


def read_line(reader: io.BufferedReader, line: bytearray) -> int:
    """
    Reads one line, including its trailing newline if there is one, into
    `line`, replacing its previous contents. Returns the number of bytes
    read, which is 0 at the end of the stream. The last line of the stream
    is returned without a newline if it doesn't have one.
    """
    line.clear()
    while True:
        # peek() returns whatever is buffered, doing at most one raw read
        # to refill the buffer when it is empty.
        available = reader.peek()
        if not available:
            return len(line)
        if (pos := available.find(b"\n")) != -1:
            line += reader.read(pos + 1)
            return len(line)
        line += reader.read(len(available))


class FastqI5Stream:
    """
    Copies FASTQ records from a reader to `out`, reverse-complementing the
    i5 barcode in each record's header. Records are only written to `out`
    once all four of their lines have been read, so that a truncated or
    malformed record never produces partial output.
    """

    def __init__(self, out: io.BufferedIOBase):
        self.out = out
        self.line = bytearray()
        self.record = bytearray()
        self.record_count = 0
        self.line_count = 0
        self.empty_i5_count = 0

    def rewrite_records(self, reader: io.BufferedReader) -> int:
        out = self.out
        line = self.line
        record = self.record

        while True:
            if not self.next_line(reader):
                # End of input at a record boundary
                break

            start, end = rewrite_header(line)
            if start == end:
                self.empty_i5_count += 1
            record.clear()
            record += line

            # Copy the remaining lines of the record unchanged
            for _ in range(1, LINES_PER_RECORD):
                if not self.next_line(reader):
                    msg = (
                        f"truncated FASTQ record (expected {LINES_PER_RECORD}"
                        " lines)"
                    )
                    raise TruncatedRecordError(msg)
                record += line

            out.write(record)
            self.record_count += 1

        logging.debug(f"Read {self.line_count:,d} lines")
        return self.record_count

    def next_line(self, reader):
        if n := read_line(reader, self.line):
            self.line_count += 1
        return n

    def stats(self):
        return {
            "records": self.record_count,
            "lines": self.line_count,
            "empty_i5_records": self.empty_i5_count,
        }


@contextmanager
def buffered_streams(raw_in, raw_out, buffer_size=IO_BUFFER_BYTES):
    """
    Wraps a pair of byte streams in buffered reader and writer layers of
    `buffer_size` bytes. Whatever has been written is flushed on exit,
    including when an exception is raised, and the wrappers are detached
    so that the underlying streams are not closed.
    """
    reader = io.BufferedReader(raw_in, buffer_size)
    writer = io.BufferedWriter(raw_out, buffer_size)
    try:
        yield reader, writer
    finally:
        try:
            writer.flush()
        finally:
            writer.detach()
            reader.detach()
            raw_out.flush()
