import logging
from typing import BinaryIO, List, Optional

from wrapline.core.composition import Compose
from wrapline.core.config import WrapConfig
from wrapline.core.filter_interface import Filter
from wrapline.filters.record_filters import (
    DiscardEmptyLastRecord,
    DiscardEmptyRecords,
    EscapeDelimiter,
    StripWhitespace,
    WrapDelimiter,
)
from wrapline.utils.io_iter import DEFAULT_CHUNK_SIZE, record_iter, write_records
from wrapline.utils.process import process_iter, reject_iter

logger = logging.getLogger(__name__)


def build_pipeline(config: WrapConfig) -> Compose:
    """
    Build the per-record filters for a configuration.

    Raises:
        DelimiterError: The delimiter token of `config` is malformed.
    """
    delimiter = config.delimiter_bytes

    filters: List[Filter] = []
    if config.strip:
        filters.append(StripWhitespace())
    filters.append(DiscardEmptyLastRecord())
    if config.skip_empty:
        filters.append(DiscardEmptyRecords())
    if config.escape and delimiter:
        filters.append(EscapeDelimiter(delimiter))
    filters.append(WrapDelimiter(delimiter))

    pipeline = Compose(filters)
    logger.debug(f"Built pipeline {pipeline!r} for {config}")
    return pipeline


def run(
    source: BinaryIO,
    sink: BinaryIO,
    config: WrapConfig,
    pipeline: Optional[Compose] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """
    Read records from `source`, wrap them and write them to `sink`.

    Each emitted record is `<delimiter><content><delimiter>` followed by a newline,
    whatever the input separator is. The sink is flushed on return and on error;
    output written before an error is left in place.

    Args:
        source (BinaryIO): Readable binary stream.
        sink (BinaryIO): Writable binary stream.
        config (WrapConfig): Settings of this run.
        pipeline (Optional[Compose]): Pre-built filters, e.g. to read the statistics
            afterwards. Built from `config` if omitted.
        chunk_size (int): Read size for the source.

    Raises:
        DelimiterError: The delimiter token is malformed.
        OSError: Reading `source` or writing `sink` failed.
    """
    if pipeline is None:
        pipeline = build_pipeline(config)

    records = record_iter(source, separator=config.separator, chunk_size=chunk_size)
    try:
        write_records(reject_iter(process_iter(records, pipeline)), sink)
    finally:
        sink.flush()

    total = pipeline.get_statistics()
    logger.debug(
        f"Processed {total.input_num} records: {total.output_num} written, "
        f"{total.discard_num} dropped"
    )
