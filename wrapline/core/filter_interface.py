import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Iterator, Optional, Set

from wrapline.core.models import Record, Statistics, get_record_info


def _is_jsonable(data: Any) -> bool:
    if data is None:
        return True
    elif isinstance(data, (bool, int, float, str)):
        return True
    return False


class Filter(ABC):
    """
    Base class for all record filters.

    The definition of record processing is in `apply` method.
    If you define a new filter, override the method.

    When this class is called, apply the filter from bytes to bytes.

    With context manager, you can use the filter as follows:
    ```python
    with YourFilter() as filt:
        data = filt(b"  some record  ")
    ```
    """

    def __init__(self, skip_rejected: bool = True, *args: Any, **kwargs: Any) -> None:
        """
        Parameters
        ----------
        skip_rejected : bool
            If `True`, the filter will skip records that are already rejected.
        """
        self.name = self.__class__.__name__
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.skip_rejected = skip_rejected

        self._statistics: Statistics = Statistics()

    @abstractmethod
    def apply(self, record: Record) -> Record:
        """
        Definition of filter behavior.

        In this method, the filter will modify `record.data` or
        set `record.is_rejected = True` to drop the record.

        Parameters
        ----------
        record : Record
            Input record

        Returns
        -------
        Record
            Processed record
        """

    def _apply(self, record: Record) -> Record:
        """
        Apply the filter to a single record.
        This method
          - skips records already rejected upstream
          - counts the statistics
          - stores the reason for rejection if the record is rejected here
        """
        stats = get_record_info(record)

        if not (self.skip_rejected and record.is_rejected):
            try:
                record = self.apply(record)
            except Exception:
                self._statistics.errors += 1
                raise

        new_stats = get_record_info(record)
        self._statistics.update_by_diff(stats, new_stats)

        if not stats["is_rejected"] and new_stats["is_rejected"]:
            record.reject_reason = self.get_jsonable_vars()

        return record

    def apply_stream(self, stream: Iterable[Record]) -> Iterator[Record]:
        """
        Apply the filter to a stream of records, one by one.
        Exceptions raised while processing are not caught.
        """
        for record in stream:
            yield self._apply(record)

    def __call__(self, data: bytes, **kwargs: Any) -> bytes:
        record = Record(data, **kwargs)
        record = self._apply(record)
        return record.data

    def get_statistics(self) -> Statistics:
        return self._statistics

    def get_statistics_map(self) -> Dict[str, Any]:
        return self._statistics.to_dict()

    def shutdown(self) -> None:
        """
        This method is called when the filter is no longer needed.
        You can override this method to release resources.
        """
        pass

    def __enter__(self) -> "Filter":
        return self

    def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
        self.shutdown()

    def get_jsonable_vars(self, exclude_keys: Optional[Set[str]] = None) -> Dict[str, Any]:
        """
        Get the member variable of this filter.
        Eligible variables are primitive types; [bool, int, float, str, None],
        and the name of the variable not starts with the underscore; `_`.
        """
        if exclude_keys is None:
            exclude_keys = set()
        return {
            k: v
            for k, v in vars(self).items()
            if (_is_jsonable(v) and (k not in exclude_keys) and (not k.startswith("_")))
        }
