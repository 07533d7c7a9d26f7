"""RC4 stream cipher over byte strings and files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .errors import AlgoError, ErrorCode


class Encoder:
    """RC4 encoder; applying it twice with the same key restores the input."""

    def __init__(self, key: Iterable[int]) -> None:
        self._key = b""
        self.change_key(key)

    def change_key(self, key: Iterable[int]) -> None:
        """Replace the key used by later calls."""
        new_key = bytes(key)
        if not new_key:
            raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS)
        self._key = new_key

    def _schedule(self) -> list[int]:
        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + self._key[i % len(self._key)]) % 256
            state[i], state[j] = state[j], state[i]
        return state

    def transform(self, data: bytes) -> bytes:
        """Encrypt or decrypt ``data`` with a freshly scheduled key stream."""
        state = self._schedule()
        out = bytearray(len(data))
        i = j = 0
        for pos, byte in enumerate(data):
            i = (i + 1) % 256
            j = (j + state[i]) % 256
            state[i], state[j] = state[j], state[i]
            out[pos] = byte ^ state[(state[i] + state[j]) % 256]
        return bytes(out)

    def encode(self, in_path: str | Path, out_path: str | Path) -> None:
        """Transform the file at ``in_path`` into ``out_path``.

        Raises AlgoError if both paths name the same file or a file cannot
        be opened.
        """
        if Path(in_path).resolve() == Path(out_path).resolve():
            raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS)
        try:
            data = Path(in_path).read_bytes()
        except OSError as err:
            raise AlgoError(ErrorCode.FILE_ERROR) from err
        try:
            Path(out_path).write_bytes(self.transform(data))
        except OSError as err:
            raise AlgoError(ErrorCode.FILE_ERROR) from err


def _attempt(encoder: Encoder, src: Path, dst: Path) -> bool:
    try:
        encoder.encode(src, dst)
    except AlgoError:
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the encoding scenarios on files in a directory (default: current)."""
    args = list(sys.argv[1:] if argv is None else argv)
    base = Path(args[0]) if args else Path.cwd()
    source = base / "test_in.txt"

    enc = Encoder(bytes([0x01, 0x02, 0x03]))
    ok = _attempt(enc, source, base / "test_output.txt")
    print(f"Test 1: Encoding {'successful' if ok else 'failed'}")
    ok = _attempt(enc, base / "test_output.txt", base / "test_decoded.txt")
    print(f"Test 2: Decoding {'successful' if ok else 'failed'}")

    enc.change_key(bytes([0x04, 0x05, 0x06]))
    ok = _attempt(enc, source, base / "test_output_changed_key.txt")
    print(f"Test 3: Encoding with changed key {'successful' if ok else 'failed'}")
    ok = _attempt(
        enc, base / "test_output_changed_key.txt", base / "test_decoded_changed_key.txt"
    )
    print(f"Test 4: Decoding with changed key {'successful' if ok else 'failed'}")

    ok = _attempt(enc, source, source)
    if not ok:
        print("Test 5: Encoding with same input and output path failed as expected")
    else:
        print("Test 5: Encoding with same input and output path did not fail as expected")

    ok = _attempt(enc, base / "non_existent_file.txt", base / "test_output_non_existent.txt")
    if not ok:
        print("Test 6: Encoding non-existent file failed as expected")
    else:
        print("Test 6: Encoding non-existent file did not fail as expected")
    return 0


if __name__ == "__main__":
    sys.exit(main())