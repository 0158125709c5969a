"""File name generator for stored voice samples.

Generated names look like ``20240102_030405_9f1c2ab4.wav``: a second-precision
timestamp for ordering, 32 random bits, and the lowercased extension of the
uploaded file. The uploaded file name itself never reaches the disk.
"""

import random
from collections.abc import Callable
from datetime import datetime
from pathlib import PurePath

DEFAULT_EXTENSION = ".wav"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
TOKEN_BITS = 32


class FileNameGenerator:
    """Generates collision-resistant file names."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = datetime.now,
        default_extension: str = DEFAULT_EXTENSION,
    ) -> None:
        """Initialize generator.

        Args:
            rng: Random source. Defaults to the system random source.
            clock: Returns the time used for the timestamp prefix.
            default_extension: Extension used when the upload has none.
        """
        self._rng = rng if rng is not None else random.SystemRandom()
        self._clock = clock
        self.default_extension = default_extension

    def extension_for(self, original_file_name: str | None) -> str:
        """Return the lowercased extension (dot included) of a file name."""
        if original_file_name:
            suffix = PurePath(original_file_name).suffix
            if suffix and suffix != ".":
                return suffix.lower()
        return self.default_extension

    def token(self) -> str:
        return f"{self._rng.getrandbits(TOKEN_BITS):08x}"

    def generate(self, original_file_name: str | None = None) -> str:
        """Generate a file name for an upload.

        Args:
            original_file_name: File name declared by the uploader.

        Returns:
            ``<yyyyMMdd_HHmmss>_<8 hex chars><extension>``.
        """
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        return f"{timestamp}_{self.token()}{self.extension_for(original_file_name)}"
