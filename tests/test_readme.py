import io

import wrapline
from wrapline import Compose, record_filters


def test_rocket_start():
    out = io.BytesIO()
    wrapline.run(io.BytesIO(b"a\nb\n"), out, wrapline.WrapConfig(delimiter="0x27"))
    assert out.getvalue() == b"'a'\n'b'\n"


def test_compose_filters():
    pipeline = Compose(
        [
            record_filters.StripWhitespace(),
            record_filters.EscapeDelimiter(b'"'),
            record_filters.WrapDelimiter(b'"'),
        ]
    )
    assert pipeline(b' say "hi" ') == b'"say \\"hi\\""'
