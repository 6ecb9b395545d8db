from typing import Any, Literal, overload

from msgspec.json import Decoder, Encoder

__all__ = ("decode_json", "encode_json")


def _type_to_string(value: Any) -> str:
    """Fallback for types msgspec cannot encode natively."""
    return str(value)


_encoder = Encoder(enc_hook=_type_to_string)
_decoder = Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> "str | bytes":
    """Encode data to JSON.

    Args:
        data: Data to encode.
        as_bytes: Return ``bytes`` instead of ``str``.

    Returns:
        The JSON document.
    """
    encoded = _encoder.encode(data)
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")


def decode_json(data: "str | bytes") -> Any:
    """Decode a JSON document into Python objects."""
    return _decoder.decode(data)
