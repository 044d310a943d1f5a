"""Small stand-alone helpers shared by the script tooling."""

from .booleans import parse_bool  # noqa: F401
from .coalesce import first_valid  # noqa: F401
from .dump import dump  # noqa: F401
from .envpath import add_path_entry, path_entries, remove_path_entry  # noqa: F401
from .mappings import to_dict, to_str_dict  # noqa: F401
from .timing import log_complete, log_start, timed  # noqa: F401

__all__ = [
	"add_path_entry",
	"dump",
	"first_valid",
	"log_complete",
	"log_start",
	"parse_bool",
	"path_entries",
	"remove_path_entry",
	"timed",
	"to_dict",
	"to_str_dict",
]
