from .guard import argument_not_blank, argument_not_empty, argument_not_none
from .mime import DEFAULT_FILE_MIME, FOLDER_MIME, is_folder, mime_type_for_extension
from .query import Query, quote
from .time import normalize_dt, parse_rfc3339, parse_rfc3339_or_none

__all__ = [
    "argument_not_none",
    "argument_not_empty",
    "argument_not_blank",
    "FOLDER_MIME",
    "DEFAULT_FILE_MIME",
    "is_folder",
    "mime_type_for_extension",
    "Query",
    "quote",
    "parse_rfc3339",
    "parse_rfc3339_or_none",
    "normalize_dt",
]
