import os

from shell.errors import OutOfMemory

LINE_BUFSIZE = 512


class LineBuffer:
    """Byte buffer that grows by a fixed LINE_BUFSIZE step when full."""

    def __init__(self, increment=LINE_BUFSIZE):
        self.increment = increment
        self.position = 0
        self._data = self._allocate(increment)

    @property
    def capacity(self):
        return len(self._data)

    def append(self, byte):
        self._data[self.position] = byte
        self.position += 1
        if self.position >= self.capacity:
            self._data.extend(self._allocate(self.increment))

    def getvalue(self):
        return bytes(self._data[:self.position])

    @staticmethod
    def _allocate(size):
        try:
            return bytearray(size)
        except MemoryError:
            raise OutOfMemory("allocation error") from None


class LineReader:
    def __init__(self, fd=0):
        self.fd = fd
        self.eof = False

    def read_line(self):
        """Read bytes up to a newline or end of input; the newline is dropped."""
        try:
            buf = LineBuffer()
            c = self._read_byte()
            while c not in (b"", b"\n"):
                buf.append(c[0])
                c = self._read_byte()
        except MemoryError:
            self._skip_line()
            raise OutOfMemory("re-allocation error") from None
        except OutOfMemory:
            self._skip_line()
            raise
        return os.fsdecode(buf.getvalue())

    def _read_byte(self):
        c = os.read(self.fd, 1)
        if not c:
            self.eof = True
        return c

    def _skip_line(self):
        # Drop what is left of a line that could not be stored
        while self._read_byte() not in (b"", b"\n"):
            pass
