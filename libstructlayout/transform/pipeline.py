from collections.abc import Callable, MutableSequence, Sequence

from libstructlayout.fields import Field
from libstructlayout.transform.config import LayoutConfig
from libstructlayout.transform.stages import (
    combine_grouped_fields,
    pad_fields,
    reorder_fields,
)

type LAYOUT_STAGE_T = Callable[[Sequence[Field]], list[Field]]
type LAYOUT_PIPELINE_T = MutableSequence[tuple[LAYOUT_STAGE_T, str]]


def create_layout_pipeline(
    config: LayoutConfig,
) -> LAYOUT_PIPELINE_T:
    """Build an layout `pipeline` from given config.

    Each stage from pipeline accepts fields from previous one and returns new fields (input is not mutated),
    first stage accepts layout as-is (with padding markers from original layout).
    """
    pipeline: LAYOUT_PIPELINE_T = []

    if not config.recurse:
        pipeline.append((combine_grouped_fields, "Grouping of nested structures"))

    pipeline.append((drop_padding_fields, "Padding removal"))
    pipeline.append((reorder_fields, "Reordering by alignment and size"))
    pipeline.append((pad_fields, "Offsets and padding recomputation"))
    return pipeline


def drop_padding_fields(fields: Sequence[Field]) -> list[Field]:
    """Remove padding markers, leaving only real fields."""
    return [field for field in fields if not field.is_padding]
