# mini_bsp/config.py
"""
Run configuration and defaults.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RunConfig:
    """Settings for one command-line run."""

    # Diagnostics
    verbose: bool = False
    tree_start_depth: int = 0

    # Geometry policy: raise on zero-area triangles instead of degrading
    strict: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    # Optional Plotly HTML scene
    plot_path: Optional[str] = None

    # Extra stack frames reserved on top of one frame per triangle
    recursion_headroom: int = 64

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        """Build a config from an argparse namespace (missing flags keep defaults)."""
        defaults = cls()
        return cls(
            verbose=getattr(args, "verbose", defaults.verbose),
            tree_start_depth=getattr(args, "tree_depth", defaults.tree_start_depth),
            strict=getattr(args, "strict", defaults.strict),
            log_level=getattr(args, "log_level", defaults.log_level),
            log_file=getattr(args, "log_file", defaults.log_file),
            plot_path=getattr(args, "plot", defaults.plot_path),
        )


# Global default instance
CONFIG = RunConfig()
