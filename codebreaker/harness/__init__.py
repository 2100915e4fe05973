from .core import break_code, run_case, run_batch
from .oracle import secret_oracle, interactive_oracle
from .io import write_csv, write_manifest

__all__ = [
    "break_code", "run_case", "run_batch",
    "secret_oracle", "interactive_oracle",
    "write_csv", "write_manifest",
]
