import logging
from typing import Iterable, Iterator

from wrapline.core.composition import Compose
from wrapline.core.models import Record

logger = logging.getLogger(__name__)


def process_iter(input_iter: Iterable[Record], pipeline: Compose) -> Iterator[Record]:
    """
    Apply the pipeline to each record lazily.

    Errors raised by a filter are not caught: a run either processes
    every record or stops at the first failure.

    Args:
        input_iter (Iterable[Record]): Input records, with `is_last` already set.
        pipeline (Compose): Processing filters.

    Yields:
        Iterator[Record]: Processed records, rejected ones included.
    """
    for record in input_iter:
        yield pipeline.apply(record)


def reject_iter(input_iter: Iterable[Record]) -> Iterator[bytes]:
    """
    Drop rejected records and yield the content of the others.
    """
    for record in input_iter:
        if record.is_rejected:
            logger.debug(f"Dropped {record!r}: {record.reject_reason}")
            continue
        yield record.data
