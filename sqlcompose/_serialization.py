"""JSON encoding used by the structured log formatter and driver type coercion."""

from typing import Any, Literal, Union, overload

import msgspec

__all__ = ("decode_json", "encode_json")

_encoder = msgspec.json.Encoder(enc_hook=str)
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode data to JSON.

    Values msgspec cannot encode natively are converted with :func:`str`.

    Args:
        data: Data to encode.
        as_bytes: Return bytes instead of a string.

    Returns:
        The JSON document.
    """
    encoded = _encoder.encode(data)
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")


def decode_json(data: Union[str, bytes]) -> Any:
    return _decoder.decode(data)
