"""
core/config.py

Run configuration collected from the command line.
"""

from dataclasses import dataclass, field

from exercises import DEFAULT_FILLER


@dataclass
class RunConfig:
    exercise: str
    texts: list = field(default_factory=list)  # list[str]
    filler: str = DEFAULT_FILLER
    log_level: str = "WARNING"
