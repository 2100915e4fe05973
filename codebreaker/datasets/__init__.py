from .validator import validate_secrets, load_secrets, pretty_summary
from .io import read_lines, write_lines

__all__ = ["validate_secrets", "load_secrets", "pretty_summary", "read_lines", "write_lines"]
