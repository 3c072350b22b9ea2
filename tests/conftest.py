import sys
from pathlib import Path

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent

# Make the flat wpp_* modules importable without an install
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
