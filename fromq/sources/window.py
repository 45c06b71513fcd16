from __future__ import annotations
from .base import Source, iterate_over, source_of
from ..types import *


class WindowBuffer(Source[T]):
    """
    fixed-capacity circular buffer holding a sliding window of
    ``window_size`` elements either side of a center element.

    the occupied slots always form one contiguous arc of
    ``1 + left_arm + right_arm`` slots around the read cursor. pushing
    grows the right arm; once it would exceed ``window_size`` the buffer
    advances first, which moves the center forward and evicts the oldest
    slot. after the upstream runs dry, ``advance()`` drains the right arm.

    the buffer is reused between windows: copy it (``list(window)``) to keep
    a window's contents.
    """

    def __init__(self, window_size: int):
        if window_size < 0:
            raise ValueError(f"window size must be non-negative, got {window_size}")
        self._arm_size = window_size
        self._stride = window_size * 2 + 1
        self._buffer: List[Optional[T]] = [None] * self._stride
        self._left_arm = -1
        self._right_arm = 0
        self._read_ptr = -1
        self._write_ptr = 0

    @property
    def value(self) -> T:
        """the element at the center of the window, none before the first push"""
        if self._read_ptr < 0:
            return None
        return self._buffer[self._read_ptr]

    @property
    def left_arm(self) -> int:
        return max(self._left_arm, 0)

    @property
    def right_arm(self) -> int:
        return max(self._right_arm, 0)

    def __len__(self) -> int:
        if self._read_ptr < 0:
            return 0
        return 1 + self.left_arm + self.right_arm

    def __iter__(self) -> Iterator[T]:
        stride = self._stride
        ptr = (self._read_ptr + stride - self._left_arm) % stride
        for _ in range(len(self)):
            yield self._buffer[ptr]
            ptr = (ptr + 1) % stride

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        stride = self._stride
        ptr = (self._read_ptr + stride - self._left_arm) % stride
        for _ in range(len(self)):
            if not iteratee(self._buffer[ptr]):
                return False
            ptr = (ptr + 1) % stride
        return True

    def advance(self) -> bool:
        """move the center one slot forward. false once the right arm is spent."""
        self._read_ptr = (self._read_ptr + 1) % self._stride
        self._left_arm = min(self._left_arm + 1, self._arm_size)
        has_more = self._right_arm > 0
        self._right_arm -= 1
        return has_more

    def push(self, value: T) -> None:
        self._buffer[self._write_ptr] = value
        self._write_ptr = (self._write_ptr + 1) % self._stride
        self._right_arm += 1
        if self._right_arm > self._arm_size:
            self.advance()

    def __repr__(self) -> str:
        return f"WindowBuffer(value={self.value!r}, window={list(self)!r})"


class FatMapSource(Source[U]):
    """
    windowed transform. the selector sees every input element as the
    center of a window of up to ``window_size`` neighbours on each side;
    windows at the start and end of the sequence are narrower.

    when ``flatten`` is set the selector returns an iterable whose items are
    emitted; otherwise its result is emitted as a single element.
    """

    def __init__(self, source: Source[T], selector: Selector[WindowBuffer[T], Any],
                 window_size: int = 1, flatten: bool = True):
        if window_size < 0:
            raise ValueError(f"window size must be non-negative, got {window_size}")
        self._source = source
        self._selector = selector
        self._window_size = window_size
        self._flatten = flatten

    def _emit(self, window: WindowBuffer[T]) -> Iterable[U]:
        result = self._selector(window)
        return source_of(result) if self._flatten else (result,)

    def __iter__(self) -> Iterator[U]:
        window = WindowBuffer(self._window_size)
        lag = self._window_size + 1
        for value in self._source:
            window.push(value)
            lag -= 1
            if lag <= 0:
                yield from self._emit(window)
        while window.advance():
            yield from self._emit(window)

    def for_each(self, iteratee: Iteratee[U]) -> bool:
        window = WindowBuffer(self._window_size)
        lag = self._window_size + 1

        def visit(value):
            nonlocal lag
            window.push(value)
            lag -= 1
            if lag <= 0:
                return iterate_over(self._emit(window), iteratee)
            return True

        if not iterate_over(self._source, visit):
            return False
        while window.advance():
            if not iterate_over(self._emit(window), iteratee):
                return False
        return True
