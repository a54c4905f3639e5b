"""
File I/O service for style and color files.

Handles:
- Encoding detection for style files written by other tools
- Atomic writes (temp file in the target directory, then replace)
- Permission and OS error reporting
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import chardet


@dataclass
class ReadResult:
    """Result of a file read operation."""
    success: bool
    content: Optional[str] = None
    encoding: Optional[str] = None
    error: Optional[str] = None
    not_found: bool = False


@dataclass
class WriteResult:
    """Result of a file write operation."""
    success: bool
    bytes_written: int = 0
    error: Optional[str] = None


class FileIOService:
    """Service for safe style file I/O."""

    def __init__(
        self,
        default_encoding: str = 'utf-8',
        fallback_encoding: str = 'latin-1',
        max_size: int = 16 * 1024 * 1024
    ):
        self.default_encoding = default_encoding
        self.fallback_encoding = fallback_encoding
        self.max_size = max_size

    def read_text(self, path: Path | str, encoding: Optional[str] = None) -> ReadResult:
        """
        Read a text file with automatic encoding detection.

        Args:
            path: Path to the file
            encoding: Force specific encoding (auto-detect if None)

        Returns:
            ReadResult with content or error information
        """
        path = Path(path)

        if not path.exists():
            return ReadResult(success=False, error=f"File not found: {path}", not_found=True)

        if not path.is_file():
            return ReadResult(success=False, error=f"Not a file: {path}")

        try:
            size = path.stat().st_size
            if size > self.max_size:
                return ReadResult(
                    success=False,
                    error=f"File too large ({size / 1024 / 1024:.2f} MB): {path}"
                )

            raw_content = path.read_bytes()
        except PermissionError:
            return ReadResult(success=False, error=f"Permission denied: {path}")
        except OSError as e:
            return ReadResult(success=False, error=f"OS error: {e}")

        detected_encoding = encoding or self._detect_encoding(raw_content)

        if raw_content.startswith(b'\xef\xbb\xbf'):
            detected_encoding = 'utf-8-sig'
        elif raw_content.startswith(b'\xff\xfe'):
            detected_encoding = 'utf-16-le'
        elif raw_content.startswith(b'\xfe\xff'):
            detected_encoding = 'utf-16-be'

        try:
            content = raw_content.decode(detected_encoding)
        except (UnicodeDecodeError, LookupError):
            content = raw_content.decode(self.fallback_encoding, errors='replace')
            detected_encoding = self.fallback_encoding

        # utf-16 BOMs survive the explicit-endian codecs
        content = content.lstrip('\ufeff')

        return ReadResult(success=True, content=content, encoding=detected_encoding)

    def write_file(
        self,
        path: Path | str,
        content: str,
        encoding: str = 'utf-8',
        atomic: bool = True
    ) -> WriteResult:
        """
        Write content to a file.

        Args:
            path: Path to write to
            content: Text to write
            encoding: Encoding to use
            atomic: Write to a temp file in the same directory, then replace

        Returns:
            WriteResult with success status
        """
        path = Path(path)
        if path.is_dir():
            return WriteResult(success=False, error=f"Not a file: {path}")

        try:
            encoded = content.encode(encoding)

            if atomic:
                dir_path = path.parent
                dir_path.mkdir(parents=True, exist_ok=True)

                fd, temp_path = tempfile.mkstemp(dir=dir_path, prefix='.', suffix='.tmp')
                try:
                    os.write(fd, encoded)
                    os.close(fd)
                    fd = -1
                    os.replace(temp_path, path)
                except Exception:
                    if fd >= 0:
                        os.close(fd)
                    if os.path.exists(temp_path):
                        os.unlink(temp_path)
                    raise
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_bytes(encoded)

            return WriteResult(success=True, bytes_written=len(encoded))

        except PermissionError:
            return WriteResult(success=False, error=f"Permission denied: {path}")
        except (OSError, UnicodeEncodeError) as e:
            logging.debug(f"FileIOService - Write failed for {path}: {e}")
            return WriteResult(success=False, error=f"Write failed: {e}")

    def _detect_encoding(self, content: bytes) -> str:
        """Detect encoding of content."""
        if not content:
            return self.default_encoding

        result = chardet.detect(content)

        if result['confidence'] > 0.7 and result['encoding']:
            encoding = result['encoding'].lower()
            if encoding == 'ascii':
                return 'utf-8'  # ASCII is subset of UTF-8
            return encoding

        return self.default_encoding
