import argparse
import dataclasses

import pytest

from wrapline.core.config import WrapConfig
from wrapline.core.errors import InvalidDelimiterSyntax


def test_defaults():
    config = WrapConfig()
    assert config.delimiter == '"'
    assert not config.strip
    assert not config.skip_empty
    assert not config.escape
    assert not config.null_terminated
    assert config.separator == b"\n"
    assert config.delimiter_bytes == b'"'


def test_null_terminated_separator():
    assert WrapConfig(null_terminated=True).separator == b"\x00"


def test_hex_delimiter_bytes():
    assert WrapConfig(delimiter="0x27").delimiter_bytes == b"'"


def test_frozen():
    config = WrapConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.strip = True  # type: ignore[misc]


def test_resolve_raises_for_malformed_token():
    with pytest.raises(InvalidDelimiterSyntax):
        WrapConfig(delimiter="0xZZ").resolve()


def test_from_args():
    args = argparse.Namespace(delimiter="|", strip=True, skip_empty=False, escape=True, null=True)
    assert WrapConfig.from_args(args) == WrapConfig(
        delimiter="|", strip=True, skip_empty=False, escape=True, null_terminated=True
    )
