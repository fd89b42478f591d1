from typing import BinaryIO, Iterable, Iterator, List, Tuple

from wrapline.core.models import Record

DEFAULT_CHUNK_SIZE = 64 * 1024


def split_records(
    stream: BinaryIO, separator: bytes = b"\n", chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[Tuple[bytes, bool]]:
    """
    Split a binary stream on a single separator byte.

    The stream is read in chunks of `chunk_size` bytes, so a record may be
    arbitrarily long and the separator is never included in the content.

    Yields:
        Iterator[Tuple[bytes, bool]]: The record content and whether it was followed by
        the separator. Only the very last item may be unterminated, and an
        unterminated item is never empty.
    """
    tail: List[bytes] = []
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        pieces = chunk.split(separator)
        if len(pieces) == 1:
            tail.append(chunk)
            continue
        tail.append(pieces[0])
        yield b"".join(tail), True
        for piece in pieces[1:-1]:
            yield piece, True
        tail = [pieces[-1]]
    rest = b"".join(tail)
    if rest:
        yield rest, False


def record_iter(
    stream: BinaryIO, separator: bytes = b"\n", chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[Record]:
    """
    Iterate records of a binary stream, flagging the terminal content with `is_last`.

    One record is held back until the next read shows whether anything follows it.
    At the end of the stream, both the held-back record and an unterminated
    trailing fragment are terminal, and they are yielded in stream order.

    >>> import io
    >>> [(r.data, r.is_last) for r in record_iter(io.BytesIO(b"a\\n\\nb\\n"))]
    [(b'a', False), (b'', False), (b'b', True)]
    """
    pending = b""
    has_pending = False
    fragment = b""

    for data, terminated in split_records(stream, separator, chunk_size):
        if not terminated:
            fragment = data
            break
        if has_pending:
            yield Record(pending, is_last=False)
        pending = data
        has_pending = True

    if has_pending:
        yield Record(pending, is_last=True)
    if fragment:
        yield Record(fragment, is_last=True)


def write_records(iter: Iterable[bytes], sink: BinaryIO) -> None:
    for data in iter:
        sink.write(data + b"\n")
