"""
Global / experimental configuration flags.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes"}


@dataclass
class SparseIdsConfig:
    debug: bool = False


config = SparseIdsConfig(debug=_env_flag("SPARSE_IDS_DEBUG"))
