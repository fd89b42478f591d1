import pytest

from wrapline.core.composition import Compose
from wrapline.core.filter_interface import Filter
from wrapline.core.models import Record
from wrapline.utils.process import process_iter, reject_iter


class MockException(Exception):
    pass


class MockFilter(Filter):
    def apply(self, record: Record) -> Record:
        if b"<reject>" in record.data:
            record.is_rejected = True
        if b"<mock_error>" in record.data:
            raise MockException
        return record


def _records(*data):
    return [Record(d) for d in data]


@pytest.mark.parametrize(
    "test_data, expected_output",
    [
        ([b"Line1", b"Line2", b"Line3"], [b"Line1", b"Line2", b"Line3"]),
        ([b"Line1", b"Line2<reject>", b"Line3"], [b"Line1", b"Line3"]),
        ([], []),
    ],
)
def test_process_and_reject_iter(test_data, expected_output):
    out_iter = reject_iter(process_iter(_records(*test_data), Compose([MockFilter()])))
    assert list(out_iter) == expected_output


def test_process_iter_keeps_rejected():
    out = list(process_iter(_records(b"a<reject>"), Compose([MockFilter()])))
    assert len(out) == 1
    assert out[0].is_rejected


def test_process_iter_raise():
    records = _records(b"Line1", b"Line2<mock_error>", b"Line3")
    out_iter = process_iter(records, Compose([MockFilter()]))
    assert next(out_iter).data == b"Line1"
    with pytest.raises(MockException):
        next(out_iter)
