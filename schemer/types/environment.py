"""Runtime environment for Schemer.

The Environment is a stack of frames, each a mapping from name to value.
The bottom frame is the global frame holding the builtin library; each
procedure activation pushes one frame on top and pops it on return.
Lookup scans from the innermost frame outwards; insert only ever writes
into the top frame.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator

from schemer.errors import SchemerError, SchemerUndefinedSymbol
from schemer.types.expression import Expression


class Environment:
    """Ordered stack of scope frames mapping names to Expression values."""

    __slots__ = ("frames",)

    def __init__(self):
        self.frames: list[dict[str, Expression]] = []

    def push(self) -> None:
        """Append an empty frame."""
        self.frames.append({})

    def pop(self) -> None:
        """Remove the top frame. Callers never pop the global frame."""
        self.frames.pop()

    @contextmanager
    def frame(self) -> Iterator[dict[str, Expression]]:
        """Push a frame for the duration of the block, popping it even on error."""
        self.push()
        try:
            yield self.frames[-1]
        finally:
            self.pop()

    def insert(self, name: str, value: Expression) -> None:
        """Bind `name` in the current top frame, overwriting any binding there."""
        if not self.frames:
            raise SchemerError(f"Cannot bind '{name}': no active frame")
        self.frames[-1][name] = value

    def update(self, mapping: dict[str, Expression]) -> None:
        """Bulk-insert a mapping of name -> value into the current top frame."""
        for k, v in mapping.items():
            self.insert(k, v)

    def find(self, name: str) -> dict[str, Expression] | None:
        """Return the innermost frame that binds `name`, or None."""
        for frame in reversed(self.frames):
            if name in frame:
                return frame
        return None

    def lookup(self, name: str) -> Expression:
        """Look up `name`, innermost frame first.

        Raises SchemerUndefinedSymbol if no active frame binds it.
        """
        frame = self.find(name)
        if frame is None:
            raise SchemerUndefinedSymbol(name)
        return frame[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    @property
    def depth(self) -> int:
        return len(self.frames)

    @staticmethod
    def _write_frame(frame: dict[str, Expression], buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Top frame only, with an indicator for outer frames."""
        with StringIO() as buffer:
            if self.frames:
                self._write_frame(self.frames[-1], buffer)
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment stack: ")
            chain = []
            for frame in reversed(self.frames):
                frame_buf = StringIO()
                self._write_frame(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
