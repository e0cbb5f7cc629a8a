from .extract import ALLOWED_EXTENSIONS, ProgressCallback, extract_text, file_extension

__all__ = ["ALLOWED_EXTENSIONS", "ProgressCallback", "extract_text", "file_extension"]
