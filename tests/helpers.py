from io import StringIO
from typing import TextIO

from mono.runtime.core import RuntimeContext
from mono.writer import IndentingWriter


def assert_keywords_in_output(keywords: tuple[str, ...], stream: TextIO) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    for keyword in keywords:
        assert keyword.lower() in output, f"{keyword!r} not in {output!r}"


def captured_context(debug: bool = False) -> tuple[RuntimeContext, StringIO]:
    stream = StringIO()
    writer = IndentingWriter(debug=debug, stream=stream)
    return RuntimeContext(writer=writer), stream
