from .error_handler import cli_structlayout_error_handler

__all__ = ["cli_structlayout_error_handler"]
