import logging
import pathlib
import sys

import click
import yaml

from fastq_i5 import __version__
from fastq_i5.header import FastqFormatError
from fastq_i5.stream import FastqI5Stream, buffered_streams


@click.command(
    help="""Rewrites FASTQ headers by reverse-complementing the i5 (Index2 /
      P5) barcode, without modifying read sequences or quality scores.
      Reads FASTQ from STDIN and writes to STDOUT. Headers are expected to
      end with the standard Illumina ':<i7>+<i5>' format.""",
)
@click.version_option(__version__, prog_name="fastq-i5-rc")
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        case_sensitive=False,
    ),
    default="WARNING",
    show_default=True,
    help="Diagnostic messages to show.",
)
@click.option(
    "--stats",
    "-s",
    "stats_file",
    type=click.Path(
        path_type=pathlib.Path,
        dir_okay=False,
    ),
    help="""Write a YAML summary of the records processed to this file.""",
)
def cli(log_level, stats_file):
    setup_logging(log_level)

    stream = None
    try:
        with buffered_streams(
            sys.stdin.buffer,
            sys.stdout.buffer,
        ) as (reader, writer):
            stream = FastqI5Stream(writer)
            count = stream.rewrite_records(reader)
    except FastqFormatError as err:
        error_exit(f"line {stream.line_count:,d}: {err}")
    except OSError as err:
        error_exit(str(err))

    logging.info(f"Rewrote i5 barcodes in {count:,d} FASTQ records")
    if stream.empty_i5_count:
        logging.info(f"  {stream.empty_i5_count:,d} records had an empty i5 barcode")

    if stats_file:
        write_stats_yaml(stats_file, stream.stats())


def setup_logging(log_level):
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        # Leave messages unchanged:
        format="%(message)s",
        # Change config if called a second time (e.g. during testing):
        force=True,
        stream=sys.stderr,
    )


def write_stats_yaml(stats_file, stats):
    with stats_file.open("w") as yaml_fh:
        yaml_fh.write(yaml.safe_dump(stats, sort_keys=False))
    logging.info(f"Stats saved: '{stats_file}'")


def error_exit(msg, code=1):
    click.echo(f"ERROR: {msg}", err=True)
    sys.exit(code)


if __name__ == "__main__":
    cli()
