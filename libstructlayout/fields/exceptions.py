from __future__ import annotations

from typing import TYPE_CHECKING

from libstructlayout.exceptions import StructLayoutError

if TYPE_CHECKING:
    from libstructlayout.fields.field import Field


class InvalidFieldAlignmentError(StructLayoutError):
    def __init__(
        self,
        *args: object,
        alignment: int,
        field: Field | None = None,
    ) -> None:
        super().__init__(*args)
        self.alignment = alignment
        self.field = field

    def __repr__(self) -> str:
        where = f" of field '{self.field.name}' ({self.field.type_name})" if self.field else ""
        return f"""Invalid alignment {self.alignment}{where}!
Alignment must be a positive number of bytes.

Is the input layout produced with alignment information for every field?"""
