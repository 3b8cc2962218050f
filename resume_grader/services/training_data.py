import logging
from pathlib import Path
from typing import Tuple

from ..prompt import TRAINING_FILES, expected_results
from ..schemas.pydantic import TrainingExample
from .exceptions import TrainingDataError

logger = logging.getLogger(__name__)

TrainingSet = Tuple[TrainingExample, ...]


def load_training_set(directory: str | Path, template_url: str) -> TrainingSet:
    """
    Read the bundled example resumes and pair them with their known grades.

    Called once at startup. Returns the examples in presentation order
    (S, A, B, C).
    """
    directory = Path(directory)
    results = expected_results(template_url)
    examples = []

    for grade, filename in TRAINING_FILES:
        path = directory / filename
        try:
            document = path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read training example {path}: {e}")
            raise TrainingDataError(f"Training example {filename} could not be read from {directory}") from e

        if not document:
            raise TrainingDataError(f"Training example {filename} is empty")

        examples.append(TrainingExample(document=document, expected_result=results[grade]))
        logger.debug(f"Loaded training example {filename} ({len(document)} bytes)")

    logger.info(f"Loaded {len(examples)} training examples from {directory}")
    return tuple(examples)
