import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from portions.domain.ScalingKnowledge import ScalingKnowledge
from portions.infra.paths import KNOWLEDGE_FILE

logger = logging.getLogger(__name__)


def read_scaling_knowledge(path: Optional[Path] = None) -> ScalingKnowledge:
    """Read scaling knowledge from a JSON file; an unreadable file yields empty knowledge."""
    json_path = Path(path) if path is not None else KNOWLEDGE_FILE
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        knowledge = ScalingKnowledge.from_dict(data)
        logger.debug(f"Loaded {knowledge} from {json_path}")
        return knowledge
    except FileNotFoundError:
        logger.warning(f"Scaling knowledge file not found: {json_path}. No scaling warnings will be raised.")
        return ScalingKnowledge()
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in scaling knowledge file: {e}")
        return ScalingKnowledge()


@lru_cache(maxsize=1)
def load_scaling_knowledge() -> ScalingKnowledge:
    """Default knowledge, read once per process."""
    return read_scaling_knowledge()


__all__ = ['read_scaling_knowledge', 'load_scaling_knowledge']
