import time
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional


class Record:
    """
    Record class represents one separator-bounded unit of the input stream.

    The content is kept as raw bytes; no decoding is performed anywhere in the pipeline.

    Attributes:
        data (bytes): The content of the record, without its separator.
        is_last (bool): A flag indicating the record is terminal content of the stream.
          Set by the reader once it has seen that no further record follows.
        is_rejected (bool): A flag indicating whether the record is dropped.
        reject_reason (Dict[str, Any]): The name and the parameters of the filter
          which rejected this record.
    """

    def __init__(self, data: bytes, is_last: bool = False, is_rejected: bool = False) -> None:
        self.data = data
        self.__original = data
        self.is_last = is_last
        self.is_rejected = is_rejected
        self.reject_reason: Dict[str, Any] = {}

    @property
    def original(self) -> bytes:
        return self.__original

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return (
            f"Record(data={self.data!r}, is_last={self.is_last}, is_rejected={self.is_rejected})"  # noqa
        )


@dataclass
class Statistics:
    """
    Statistics class to track the records passing through a filter.
    """

    name: Optional[str] = None
    input_num: int = 0
    input_bytes: int = 0
    output_num: int = 0
    output_bytes: int = 0
    discard_num: int = 0
    diff_bytes: int = 0
    cumulative_time_ns: int = 0
    errors: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def reset(self) -> "Statistics":
        for f in fields(self):
            if f.name != "name":
                setattr(self, f.name, 0)
        return self

    def update_by_diff(self, before: Dict[str, Any], after: Dict[str, Any]) -> None:
        """
        Update the statistics from the record-info mappings taken before and after a filter.
        """
        self.input_num += 1
        self.input_bytes += before["bytes"]
        self.cumulative_time_ns += after["time_ns"] - before["time_ns"]
        if not before["is_rejected"] and after["is_rejected"]:
            # Record is rejected by this filter
            self.discard_num += 1
            self.diff_bytes -= before["bytes"]
        else:
            self.output_num += 1
            self.output_bytes += after["bytes"]
            self.diff_bytes += after["bytes"] - before["bytes"]

    @staticmethod
    def get_filter(name: str, stats: List["Statistics"]) -> "Statistics":
        """
        Get a Statistics object by its name from a list of statistics.
        """
        for stat in stats:
            if stat.name == name:
                return stat
        raise KeyError(f"Statistics with name '{name}' not found in the list.")


def get_record_info(record: Record) -> Dict[str, Any]:
    return {
        "is_rejected": record.is_rejected,
        "bytes": len(record.data),
        "time_ns": time.perf_counter_ns(),
    }
