"""Pytest configuration for the flat_trajectories package.

This file ensures the package can be imported without installation.
"""

import importlib.util
import os
import sys
from pathlib import Path

# Plots are written to files only during tests
os.environ.setdefault("MPLBACKEND", "Agg")

package_root = Path(__file__).parent
src_dir = package_root / "src"

# Always reload to pick up changes
if "flat_trajectories" in sys.modules:
    del sys.modules["flat_trajectories"]
    to_remove = [k for k in sys.modules.keys() if k.startswith("flat_trajectories.")]
    for k in to_remove:
        del sys.modules[k]

# Make 'src' importable as 'flat_trajectories'
spec = importlib.util.spec_from_file_location(
    "flat_trajectories", src_dir / "__init__.py", submodule_search_locations=[str(src_dir)]
)
flat_trajectories = importlib.util.module_from_spec(spec)
sys.modules["flat_trajectories"] = flat_trajectories
spec.loader.exec_module(flat_trajectories)
