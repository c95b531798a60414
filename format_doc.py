#!/usr/bin/env python3
"""
docfmt - documentation comment formatter

Simple usage:
    python format_doc.py summary.xml                      # Plain text
    python format_doc.py summary.xml --symbols refs.json  # Resolve <see cref=...>
    python format_doc.py summary.xml --runs               # Typed display runs
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from docfmt.cli import app

if __name__ == "__main__":
    app()
