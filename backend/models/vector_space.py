"""Vector space data model."""
from dataclasses import dataclass
from typing import List
import numpy as np


@dataclass
class VectorSpace:
    """
    TF-IDF vectors for one chunk corpus.

    Row i of `vectors` belongs to chunk i; column j of every row is the
    weight of `vocabulary[j]`.
    """
    vocabulary: List[str]
    vectors: np.ndarray  # shape (chunk_count, len(vocabulary))

    @property
    def size(self) -> int:
        return len(self.vocabulary)
