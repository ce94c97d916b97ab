"""Type aliases for bytes-to-type."""
import mmap
from typing import TypeAlias

import numpy as np

BytesLike: TypeAlias = bytes | bytearray | memoryview | mmap.mmap | np.ndarray
JobData: TypeAlias = dict[str, object]
