from dataclasses import dataclass, replace

from typing_extensions import override

from ivalgebra.interval import Interval


@dataclass(frozen=True, kw_only=True)
class StringInterval(Interval[int]):
    """A run of characters in ``source``, as the half-open offsets ``[start, end)``.

    Derived intervals produced by the algebra stay attached to the same
    source string, so ``value`` always reflects the text they cover.
    """

    source: str
    start: int
    length: int

    def __post_init__(self) -> None:
        if not isinstance(self.source, str):
            raise TypeError(
                f"StringInterval source must be a str, "
                f"got {type(self.source).__name__!r}: {self.source!r}"
            )
        size = len(self.source)
        if self.start < 0 or self.start > size:
            raise ValueError(
                f"StringInterval start ({self.start}) must be within 0..{size}.\n"
                f"Source has {size} characters: {self.source!r}"
            )
        if self.length < 0 or self.start + self.length > size:
            raise ValueError(
                f"StringInterval length ({self.length}) starting at {self.start} "
                f"runs outside the source ({size} characters).\n"
                f"Hint: length must satisfy 0 <= length <= {size - self.start}"
            )

    @classmethod
    def whole(cls, source: str) -> "StringInterval":
        """The interval covering every character of ``source``."""
        if not isinstance(source, str):
            raise TypeError(
                f"StringInterval source must be a str, "
                f"got {type(source).__name__!r}: {source!r}"
            )
        return cls(source=source, start=0, length=len(source))

    @property
    def end(self) -> int:  # pyright: ignore[reportIncompatibleVariableOverride]
        return self.start + self.length

    @property
    def start_inclusive(self) -> bool:  # pyright: ignore[reportIncompatibleVariableOverride]
        return True

    @property
    def end_inclusive(self) -> bool:  # pyright: ignore[reportIncompatibleVariableOverride]
        return False

    @property
    def value(self) -> str:
        """The substring this interval denotes."""
        return self.source[self.start : self.end]

    @override
    def with_bounds(
        self, start: int, start_inclusive: bool, end: int, end_inclusive: bool
    ) -> "StringInterval":
        # Offsets are always half-open; the inclusivity flags are not representable.
        return replace(self, start=start, length=end - start)
