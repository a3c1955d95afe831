# transcript/ports.py
from typing import List, Protocol

import numpy as np
from numpy.typing import NDArray


class TokenDecoder(Protocol):
    """
    Speech decoder interface (port).
    Implementations take audio samples and return raw token strings in
    emission order: whole words, single letters or split diacritics.
    """
    def decode(self, samples: NDArray[np.float32]) -> List[str]:
        ...
