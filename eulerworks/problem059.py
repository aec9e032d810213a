"""Recover a three-letter XOR key from a cipher text and sum the plain text."""

from __future__ import annotations

import argparse
import itertools
import string
import sys
import time
from collections.abc import Iterable, Iterator

_KEY_LENGTH = 3
_TEXT_CHARS = frozenset(
    string.ascii_letters + string.digits + ",  :!?;." + "\"-'[]+/()"
)


def is_text_char(code: int) -> bool:
    """Return True if the character code may appear in the plain text."""
    return 0 <= code < 128 and chr(code) in _TEXT_CHARS


def parse_cipher(text: str) -> list[int]:
    """Parse comma-separated character codes such as ``"36,22,80"``."""
    stripped = text.strip()
    if not stripped:
        raise ValueError("cipher text is empty")
    try:
        return [int(part) for part in stripped.split(",")]
    except ValueError:
        raise ValueError(f"cipher text holds a value that is not a number: {text!r}") from None


def decrypt(data: Iterable[int], key: str) -> bytes:
    """XOR every code of ``data`` with the key, repeating the key as needed."""
    if not key:
        raise ValueError("key must not be empty")
    key_codes = key.encode("ascii")
    return bytes(code ^ k for code, k in zip(data, itertools.cycle(key_codes)))


def keys() -> Iterator[str]:
    """Yield every three-letter lower-case key, the first letter changing fastest."""
    for combo in itertools.product(string.ascii_lowercase, repeat=_KEY_LENGTH):
        yield "".join(reversed(combo))


def crack(data: Iterable[int]) -> tuple[str, bytes]:
    """Return the first key that turns ``data`` into text, with that text."""
    codes = list(data)
    for key in keys():
        plain = decrypt(codes, key)
        if all(is_text_char(code) for code in plain):
            return key, plain
    raise ValueError("no key decrypts the data into text")


def main(argv: list[str] | None = None) -> int:
    """Read a cipher file, print the key found and the sum of the plain text codes."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default="cipher.txt")
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    try:
        with open(args.path, encoding="ascii") as handle:
            data = parse_cipher(handle.read())
    except OSError as error:
        print(f"cannot open file {args.path!r}: {error}", file=sys.stderr)
        return 1
    key, plain = crack(data)
    elapsed = time.perf_counter() - begin
    print(f"XOR key: {key}")
    print(f"answer = {sum(plain)} runtime = {elapsed:f}")
    return 0