import gzip

import pytest

from triewebkit.compressor import Compressor, GzipCompressor


def test_encoding_name():
    assert GzipCompressor().encoding == "gzip"


def test_empty_input_gives_empty_output():
    assert GzipCompressor().compress(b"") == b""
    assert GzipCompressor().compress("") == b""


@pytest.mark.parametrize("payload", [b"a", b"hello world" * 100, bytes(range(256)) * 50])
def test_round_trip(payload):
    assert gzip.decompress(GzipCompressor().compress(payload)) == payload


def test_gzip_magic_bytes():
    assert GzipCompressor().compress(b"data")[:2] == b"\x1f\x8b"


def test_text_is_utf8_encoded():
    text = "héllo wörld"
    assert gzip.decompress(GzipCompressor().compress(text)) == text.encode("utf-8")


def test_repetitive_data_shrinks():
    payload = b"x" * 10000
    assert len(GzipCompressor().compress(payload)) < len(payload)


def test_compressor_is_abstract():
    with pytest.raises(TypeError):
        Compressor()