"""
run_montage.py — CLI Entry Point

This script serves as the command-line interface entry point for the
masonry montage tool. It forwards execution to the CLI logic defined in
`src/masonry_montage/cli.py`.

Usage:
    python run_montage.py --input path/to/images [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_montage.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import masonry_montage.cli as mm_cli

if __name__ == "__main__":
    sys.exit(mm_cli.main())
