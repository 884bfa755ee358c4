"""
Root conftest.py - Set up Python path before test collection.

This file is loaded by pytest before any test modules are imported,
allowing flat top-level modules (agent_platform, flubr_bot) to import
without an install.
"""

import sys
from pathlib import Path

# Add the project root to Python path so imports work correctly
impl_root = Path(__file__).parent
sys.path.insert(0, str(impl_root))
