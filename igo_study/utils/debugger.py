"""
Board snapshots saved while debugging a study session.
"""
import os
from typing import List, Optional

import cv2
import numpy as np
from PIL import Image


class Debugger:
    """Writes numbered PNG snapshots of rendered positions to one directory.

    Only one debugger is active per process; components look it up with
    get_instance() and skip snapshots when it returns None.
    """

    _active: Optional['Debugger'] = None

    @classmethod
    def enable(cls, debug_dir: str) -> 'Debugger':
        cls._active = cls(debug_dir)
        return cls._active

    @classmethod
    def disable(cls):
        cls._active = None

    @classmethod
    def get_instance(cls) -> Optional['Debugger']:
        return cls._active

    def __init__(self, debug_dir: str):
        self.debug_dir = debug_dir
        self.saved: List[str] = []
        os.makedirs(debug_dir, exist_ok=True)

    @property
    def snapshot_count(self) -> int:
        return len(self.saved)

    def save_snapshot(self, image: np.ndarray, name: str) -> str:
        """Save a BGR or grayscale board image as '<NN>_<name>.png'.

        Returns:
            Path of the written file
        """
        path = os.path.join(self.debug_dir, f"{self.snapshot_count + 1:02d}_{name}.png")
        if image.ndim == 3:
            image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        Image.fromarray(image).save(path)
        self.saved.append(path)
        return path
