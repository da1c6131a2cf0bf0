"""Simple launcher for the road network registry.

Runs the interactive menu from a source checkout, without installing the
package. The data files are read from and written to the current
directory unless RN_STORAGE_DATA_DIR says otherwise.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    project_root = Path(__file__).resolve().parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    from road_network.cli import main as run_cli

    return run_cli()


if __name__ == "__main__":
    sys.exit(main())
