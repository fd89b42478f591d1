# flake8: noqa
"""
Utilities mainly used by implementation of the CLI tool, but some are useful for users.

- `wrapline.utils.io_iter` -- Splits a binary stream into records with one-record lookahead, and writes output lines.
- `wrapline.utils.process` -- Applies the filter pipeline to the records iteratively.
"""
