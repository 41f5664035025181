from .registry import ACCESSOR_NAMES, CAPTURE_OPTIONS, LRUN_OPTIONS, Cardinality, cardinality, is_flag
from .merge import merge_options
from .expand import expand_option, expand_options, flag_name

__all__ = [
    "ACCESSOR_NAMES",
    "CAPTURE_OPTIONS",
    "LRUN_OPTIONS",
    "Cardinality",
    "cardinality",
    "is_flag",
    "merge_options",
    "expand_option",
    "expand_options",
    "flag_name",
]
