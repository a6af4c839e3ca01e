from typing import BinaryIO


def ascii_zterm(buf: bytes) -> str:
    """Return a string from an ASCII-encoded, zero-terminated buffer.

    The first null character is searched for, and anything after it is
    ignored. If the string fills the buffer exactly, there is no terminator
    and the whole buffer is used.

    :raises UnicodeDecodeError: If the string is not ASCII-encoded.
    """
    null_index = buf.find(b"\0")
    if null_index > -1:
        buf = buf[:null_index]
    return buf.decode("ascii")


class StreamReader:
    """Track reads from a seekable binary stream.

    Unlike reading from a buffer, a short read is not an error here. Callers
    compare the length of the returned data.
    """

    def __init__(self, f: BinaryIO):
        self.f = f
        self.prev = f.tell()

    @property
    def offset(self) -> int:
        return self.f.tell()

    @offset.setter
    def offset(self, value: int) -> None:
        self.f.seek(value)

    def read_bytes(self, length: int) -> bytes:
        self.prev = self.f.tell()
        return self.f.read(length)
