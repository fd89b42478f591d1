# flake8: noqa
"""
Filters applied to each record.

- `wrapline.filters.record_filters` -- Whitespace stripping, empty-record dropping, delimiter escaping and wrapping.
"""
