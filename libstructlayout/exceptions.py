import re
from abc import abstractmethod

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class StructLayoutError(Exception):
    """Input layout cannot be transformed, whole transformation is aborted and no layout is produced.

    Subclasses describe what is wrong with the input in `__repr__` (shown to the user as-is).
    """

    @abstractmethod
    def __repr__(self) -> str:
        return f"Layout cannot be optimized ({super().__repr__()})"

    def __str__(self) -> str:
        return repr(self)

    @property
    def generic_error_name(self) -> str:
        """Tag of the error kind, e.g `[field-decode-error]` for `FieldDecodeError`."""
        name = _WORD_BOUNDARY.sub("-", self.__class__.__name__).lower()
        return f"[{name}]"
