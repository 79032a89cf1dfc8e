"""
Output streams used by processes.

Commands write either str or bytes; the stream encodes text as UTF-8 and
forwards it to the underlying binary stream. Text-only targets (such as
io.StringIO) are also accepted, in which case bytes are decoded instead.
"""

import io
import sys
from typing import IO, Optional, Union


class OutputStream:
    """
    Byte-oriented output sink.

    Usage:
        out = OutputStream.to_buffer()
        out.write("hello\\n")
        out.write(b"world\\n")
        out.get_value()  # b'hello\\nworld\\n'
    """

    def __init__(self, stream: Optional[IO] = None):
        """
        Initialize the stream

        Args:
            stream: Binary or text file object (default: new in-memory buffer)
        """
        self.stream = stream if stream is not None else io.BytesIO()
        self._text = isinstance(self.stream, io.TextIOBase)

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create a stream backed by an in-memory buffer"""
        return cls(io.BytesIO())

    @classmethod
    def to_stdout(cls) -> 'OutputStream':
        """Create a stream writing to the process stdout"""
        return cls.wrap(sys.stdout)

    @classmethod
    def wrap(cls, stream: Union['OutputStream', IO]) -> 'OutputStream':
        """
        Adapt an arbitrary file object to an output stream.

        Text streams with an underlying binary buffer (sys.stdout, open(..., 'w'))
        are written through their buffer so that str and bytes writes stay in order.
        """
        if isinstance(stream, OutputStream):
            return stream
        if isinstance(stream, io.TextIOBase) and hasattr(stream, 'buffer'):
            stream.flush()
            return cls(stream.buffer)
        return cls(stream)

    def write(self, data: Union[str, bytes]) -> int:
        """
        Write text or bytes.

        Returns:
            Number of characters or bytes accepted
        """
        if self._text:
            if isinstance(data, bytes):
                data = data.decode('utf-8', errors='replace')
            self.stream.write(data)
        else:
            if isinstance(data, str):
                data = data.encode('utf-8')
            self.stream.write(data)
        return len(data)

    def flush(self):
        """Flush the underlying stream"""
        self.stream.flush()

    def get_value(self) -> bytes:
        """
        Get everything written so far.

        Only meaningful for in-memory streams; returns b'' otherwise.
        """
        getvalue = getattr(self.stream, 'getvalue', None)
        if getvalue is None:
            return b''
        value = getvalue()
        if isinstance(value, str):
            return value.encode('utf-8')
        return value


class ErrorStream(OutputStream):
    """Output stream for diagnostics"""

    @classmethod
    def to_stderr(cls) -> 'ErrorStream':
        """Create a stream writing to the process stderr"""
        return cls.wrap(sys.stderr)
