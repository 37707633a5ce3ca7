from __future__ import annotations

from dataclasses import dataclass, replace

# Type tag of a field that represents several collapsed fields of a nested structure
STRUCT_TYPE_MARKER = "struct"


@dataclass(frozen=True, slots=True)
class Field:
    """Single unit of structure memory layout, or a synthetic padding gap between them."""

    name: str
    type_name: str

    # Byte offsets within structure, `end - start == size` once layout is finalized
    start: int
    end: int

    size: int
    align: int

    is_padding: bool = False

    @classmethod
    def padding(cls, start: int, end: int) -> Field:
        """Construct padding that fills gap [start, end)."""
        assert end >= start, "Padding must not have negative size"
        return cls(
            name="",
            type_name="",
            start=start,
            end=end,
            size=end - start,
            align=1,
            is_padding=True,
        )

    def placed_at(self, offset: int) -> Field:
        """Copy of that field moved to given offset, preserving its size."""
        return replace(self, start=offset, end=offset + self.size)

    @property
    def is_zero_sized(self) -> bool:
        return self.size == 0

    @property
    def prefix(self) -> str:
        """Name truncated to its first two components (e.g `T.s.x` -> `T.s`), used for grouping."""
        return ".".join(self.name.split(".")[:2])
