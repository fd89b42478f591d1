import logging
from typing import Any, Dict, Iterable, Iterator, List

from wrapline.core.filter_interface import Filter
from wrapline.core.models import Record, Statistics, get_record_info


class Compose(Filter):
    def __init__(self, filters: List[Filter], *args: Any, **kwargs: Any) -> None:
        """
        Compose a filter from pre-defined filter-objects.
        Once a record is rejected, the remaining filters are not applied to it.

        Parameters
        ----------
        filters : List[Filter]
            Filter instances applied to each record, in order.
        """
        super().__init__(*args, **kwargs)
        self.set_filters(filters)
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")

        self._statistics.name = "Total"

    def set_filters(self, filters: List[Filter]) -> None:
        """
        Set the filters to a Compose object. Filters bound by a nested
        Compose are expanded in place.

        Args:
            filters (List[Filter]): Target filters
        """
        self.filters: List[Filter] = []

        flat: List[Filter] = []
        for f in filters:
            if isinstance(f, Compose):
                flat.extend(f.filters)
            else:
                flat.append(f)

        for filter_idx, f in enumerate(flat):
            name = f"{filter_idx}-{f.__class__.__name__}"
            f.name = name
            f._statistics.name = name
            self.filters.append(f)

    def __call__(self, data: bytes, **kwargs: Any) -> bytes:
        """
        Apply the composed filter to bytes and return the processed bytes.
        If the record is rejected, return empty bytes.
        """
        record = self.apply(Record(data, **kwargs))
        if record.is_rejected:
            return b""
        else:
            return record.data

    def apply(self, record: Record) -> Record:
        stat = get_record_info(record)
        for filt in self.filters:
            if record.is_rejected:
                break
            record = filt._apply(record)
        new_stat = get_record_info(record)
        self._statistics.update_by_diff(stat, new_stat)
        return record

    def apply_stream(self, stream: Iterable[Record]) -> Iterator[Record]:
        for record in stream:
            yield self.apply(record)

    def get_total_statistics(self) -> List[Statistics]:
        """
        Get the statistics of the Compose object and sub filters.

        The statistics of the Compose class are stored in an object with the name "Total",
        and sub-filters's are stored with names in the format {filter_index}-{filter class name}.
        """
        stats = [self.get_statistics()]
        for filt in self.filters:
            stats.append(filt.get_statistics())
        return stats

    def get_total_statistics_map(self) -> List[Dict[str, Any]]:
        return [stat.to_dict() for stat in self.get_total_statistics()]

    def shutdown(self) -> None:
        for f in self.filters:
            f.shutdown()

        super().shutdown()

    def __repr__(self) -> str:
        names = ", ".join(f.name for f in self.filters)
        return f"Compose([{names}])"
