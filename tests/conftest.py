"""
Pytest configuration for byte chunker tests.

Puts the repository root on the import path so the top-level packages
can be imported the same way the library imports them.
"""
import sys
from pathlib import Path

# Add repository root to Python path for imports
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))
