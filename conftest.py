import sys
from pathlib import Path

# Project root on PYTHONPATH for the flat layout
root_dir = Path(__file__).parent
sys.path.insert(0, str(root_dir))
