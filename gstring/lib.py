from typing import Literal

_Encoding = Literal["UTF-8", "UTF-16-LE", "UTF-32-LE"]


def encode(text: str, encoding: _Encoding = "UTF-8") -> bytes:
    return text.encode(encoding, errors="surrogateescape")


def n_digits(number: int) -> int:
    return len(str(number))
