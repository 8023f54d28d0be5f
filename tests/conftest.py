"""Test configuration and fixtures for the entire test suite."""

import sys
from pathlib import Path

from dotenv import load_dotenv

# Add the project root to the Python path so `src.` and `tests.` imports
# resolve at collection time
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Load environment variables from .env file
load_dotenv()
