from collections.abc import Sequence
from dataclasses import dataclass

from libstructlayout.fields import Field


@dataclass(frozen=True, slots=True)
class LayoutStatistics:
    size: int
    padding: int
    fields: int


def collect_layout_statistics(fields: Sequence[Field]) -> LayoutStatistics:
    """Total size of layout, bytes spent on padding and count of real fields."""
    return LayoutStatistics(
        size=max((field.end for field in fields), default=0),
        padding=sum(field.size for field in fields if field.is_padding),
        fields=sum(1 for field in fields if not field.is_padding),
    )
