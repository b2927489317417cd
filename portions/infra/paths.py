from pathlib import Path
from portions.utilities.config import SCALING_KNOWLEDGE_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
KNOWLEDGE_FILE = SCALING_KNOWLEDGE_FILE.resolve()

__all__ = ['DATA_DIR', 'KNOWLEDGE_FILE']
