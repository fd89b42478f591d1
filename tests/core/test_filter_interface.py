import pytest

from wrapline.core.filter_interface import Filter
from wrapline.core.models import Record


class DummyFilter(Filter):
    """Appends b"_ok" to the record."""

    def apply(self, record: Record) -> Record:
        record.data = record.data + b"_ok"
        return record


class DummyRejectFilter(Filter):
    """Always rejects."""

    def apply(self, record: Record) -> Record:
        record.is_rejected = True
        return record


class DummyRaiseFilter(Filter):
    def apply(self, record: Record) -> Record:
        raise ValueError("boom")


class DummyParamFilter(Filter):
    def __init__(self, threshold: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.threshold = threshold
        self.raw = b"not jsonable"
        self._private = 1

    def apply(self, record: Record) -> Record:
        if len(record.data) < self.threshold:
            record.is_rejected = True
        return record


def test_call_returns_bytes():
    assert DummyFilter()(b"hello") == b"hello_ok"


def test_name_and_logger():
    filt = DummyFilter()
    assert filt.name == "DummyFilter"
    assert filt.logger.name.endswith(".DummyFilter")


def test_cannot_instantiate_abstract():
    with pytest.raises(TypeError):
        Filter()  # type: ignore[abstract]


def test_get_statistics_accumulates_across_calls():
    filt = DummyFilter()
    for data in [b"A", b"BB"]:
        filt._apply(Record(data))
    stats = filt.get_statistics()
    assert stats.input_num == 2
    assert stats.output_num == 2
    assert stats.discard_num == 0
    assert stats.diff_bytes == 6
    assert filt.get_statistics_map()["input_bytes"] == 3


def test_skip_rejected():
    filt = DummyFilter()
    record = filt._apply(Record(b"x", is_rejected=True))
    assert record.data == b"x"

    filt = DummyFilter(skip_rejected=False)
    record = filt._apply(Record(b"x", is_rejected=True))
    assert record.data == b"x_ok"


def test_reject_reason_is_jsonable_vars():
    filt = DummyParamFilter(threshold=3)
    record = filt._apply(Record(b"ab"))
    assert record.is_rejected
    assert record.reject_reason == {
        "name": "DummyParamFilter",
        "skip_rejected": True,
        "threshold": 3,
    }
    assert filt.get_statistics().discard_num == 1


def test_reject_reason_not_overwritten_downstream():
    record = DummyRejectFilter()._apply(Record(b"a"))
    reason = record.reject_reason
    record = DummyParamFilter(threshold=10)._apply(record)
    assert record.reject_reason is reason


def test_errors_propagate_and_are_counted():
    filt = DummyRaiseFilter()
    with pytest.raises(ValueError):
        filt._apply(Record(b"a"))
    assert filt.get_statistics().errors == 1


def test_apply_stream():
    filt = DummyFilter()
    out = list(filt.apply_stream(iter([Record(b"a"), Record(b"b")])))
    assert [r.data for r in out] == [b"a_ok", b"b_ok"]


def test_apply_stream_is_lazy_and_raises():
    stream = DummyRaiseFilter().apply_stream(iter([Record(b"a")]))
    with pytest.raises(ValueError):
        next(stream)


def test_context_manager_calls_shutdown():
    class ShutdownFilter(DummyFilter):
        def __init__(self) -> None:
            super().__init__()
            self.closed = False

        def shutdown(self) -> None:
            self.closed = True

    with ShutdownFilter() as filt:
        assert filt(b"x") == b"x_ok"
    assert filt.closed
