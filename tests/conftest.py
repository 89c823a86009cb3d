"""
Pytest configuration for gline tests.
"""

import os
import sys

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
