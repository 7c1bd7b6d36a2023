"""Report Extractor: turn flat text reports into normalized tables."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
