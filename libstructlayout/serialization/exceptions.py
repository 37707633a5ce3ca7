from libstructlayout.exceptions import StructLayoutError


class FieldDecodeError(StructLayoutError):
    def __init__(
        self,
        *args: object,
        reason: str,
        index: int | None = None,
        key: str | None = None,
    ) -> None:
        super().__init__(*args)
        self.reason = reason
        self.index = index
        self.key = key

    def __repr__(self) -> str:
        location = ""
        if self.index is not None:
            location = f" at field #{self.index}"
            if self.key is not None:
                location += f" (key '{self.key}')"
        return f"""Unable to decode input layout{location}: {self.reason}

Expected JSON array of objects with keys: name, type, start, end, size, align, is_padding"""
