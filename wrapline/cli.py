import argparse
import json
import logging
import os
import sys
from typing import BinaryIO, List, NoReturn, Optional

import tqdm

import wrapline
from wrapline.core.config import DEFAULT_DELIMITER, WrapConfig
from wrapline.core.errors import DelimiterError
from wrapline.core.pipeline import build_pipeline, run

logger = logging.getLogger("wrapline.cli")


class ProgressBarStreamWrapper:
    """Binary stream proxy advancing a byte progress bar on each read."""

    def __init__(self, stream: BinaryIO, total_bytes: Optional[int] = None) -> None:
        self.stream = stream
        self.pbar = tqdm.tqdm(total=total_bytes, unit="B", unit_scale=True, unit_divisor=1024)

    def read(self, size: int = -1) -> bytes:
        chunk = self.stream.read(size)
        self.pbar.update(len(chunk))
        return chunk


def argparser(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=wrapline.PROGRAM_NAME,
        description="Wrap each line of a file or STDIN with a delimiter.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        metavar="FILE",
        help="Input file, or '-' for STDIN. STDIN is read when omitted and data is piped in.",
    )
    parser.add_argument(
        "--delimiter",
        "-d",
        default=DEFAULT_DELIMITER,
        help="Delimiter to wrap lines with (or hex value with 0x prefix, e.g. 0x27).",
    )
    parser.add_argument(
        "--strip",
        "-s",
        action="store_true",
        help="Strip whitespace from lines before wrapping.",
    )
    parser.add_argument(
        "--skip-empty",
        "-e",
        action="store_true",
        help="Do not emit empty lines. An empty last line is never emitted.",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="Escape delimiter characters within lines with a backslash.",
    )
    parser.add_argument(
        "--null",
        "-0",
        action="store_true",
        help="Read null-terminated records instead of newline-terminated lines.",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Specifies the path for the output file. Defaults to standard output.",
    )
    parser.add_argument(
        "--dump-stats",
        default=None,
        metavar="<path to stats.json>",
        help="Dump statistics to file. If the file exists, it will be appended.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on standard error.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level of the messages written to standard error.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"{wrapline.PROGRAM_NAME} v{wrapline.__version__}\n{wrapline.PROGRAM_URL}",
    )
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s]%(name)s:%(message)s"))
    root = logging.getLogger("wrapline")
    root.handlers = [handler]
    root.setLevel(level)


def fail(message: str) -> NoReturn:
    logger.error(f"Error: {message}")
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    args = argparser(argv)
    setup_logging(args.log_level)

    config = WrapConfig.from_args(args)
    try:
        pipeline = build_pipeline(config)
    except DelimiterError as e:
        fail(f"invalid delimiter: {e}")

    filename = args.file
    if filename is None:
        if sys.stdin.isatty():
            fail("exactly one filename (or '-' for STDIN) required")
        filename = "-"

    file_in = None
    file_out = None
    try:
        source: BinaryIO
        total_bytes = None
        if filename == "-":
            source = sys.stdin.buffer
        else:
            try:
                file_in = open(filename, "rb")
                total_bytes = os.path.getsize(filename)
            except OSError as e:
                fail(f"failed to open file '{filename}': {e}")
            source = file_in  # type: ignore[assignment]

        sink: BinaryIO
        if args.output:
            try:
                file_out = open(args.output, "wb")
            except OSError as e:
                fail(f"failed to create output file '{args.output}': {e}")
            sink = file_out  # type: ignore[assignment]
        else:
            sink = sys.stdout.buffer

        progress = None
        if args.progress:
            progress = ProgressBarStreamWrapper(source, total_bytes=total_bytes)
            source = progress  # type: ignore[assignment]

        try:
            run(source, sink, config, pipeline=pipeline)
        except BrokenPipeError:
            # Python flushes stdout again at exit; point it at devnull so that flush succeeds.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(1)
        except OSError as e:
            fail(f"{e}")
        finally:
            if progress is not None:
                progress.pbar.close()
    finally:
        if file_in:
            file_in.close()
        if file_out:
            file_out.close()

    if args.dump_stats:
        with open(args.dump_stats, "a") as fp:
            fp.write(json.dumps(pipeline.get_total_statistics_map(), ensure_ascii=False) + "\n")


if __name__ == "__main__":
    main()
