from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Tuple
import numpy as np


class Capture(ABC):
    @abstractmethod
    def is_opened(self) -> bool:
        pass

    @abstractmethod
    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        pass

    @abstractmethod
    def restart(self) -> None:
        pass

    @abstractmethod
    def release(self) -> None:
        pass

    def __enter__(self) -> "Capture":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
