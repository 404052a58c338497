"""Byte recoding through the external iconv utility."""

import subprocess
from typing import Callable, List

from ..errors import RecodeError
from .logging import get_logger

# (raw bytes, source encoding) -> UTF-8 bytes
Recoder = Callable[[bytes, str], bytes]

TARGET_ENCODING = 'utf-8'


class IconvRecoder:
    """
    Recode raw bytes to UTF-8 with ``iconv``.

    Each call spawns one process, feeds it the whole input on stdin and
    buffers the whole output. Nothing is kept between calls.
    """

    def __init__(self, command: str = 'iconv'):
        self.command = command

    def build_command(self, source_encoding: str) -> List[str]:
        return [self.command, '-f', source_encoding, '-t', TARGET_ENCODING]

    def encode_to_utf8(self, data: bytes, source_encoding: str) -> bytes:
        """
        Convert ``data`` from ``source_encoding`` to UTF-8.

        Args:
            data: Raw file contents
            source_encoding: Encoding name understood by iconv

        Returns:
            UTF-8 encoded bytes

        Raises:
            RecodeError: iconv could not be started or exited non-zero
        """
        cmd = self.build_command(source_encoding)
        get_logger().debug(f"Running {' '.join(cmd)} on {len(data)} bytes")

        try:
            process = subprocess.run(cmd, input=data, capture_output=True, check=False)
        except OSError as e:
            raise RecodeError(f"failed to execute {self.command}: {e}", source_encoding) from e

        if process.returncode != 0:
            stderr = process.stderr.decode('utf-8', errors='replace').strip()
            raise RecodeError(
                f"{self.command} exited with status {process.returncode}: {stderr}",
                source_encoding
            )

        return process.stdout

    __call__ = encode_to_utf8
