"""File access for loading and saving documents.

Text is decoded as UTF-8 with ``surrogateescape`` so bytes that are not
valid UTF-8 come back out unchanged when the document is saved.
"""

import logging
import os
import stat
import tempfile
from typing import List

from .buffer import LineBuffer
from .constants import EditorConstants

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'
ERRORS = 'surrogateescape'


def read_lines(filename: str) -> List[str]:
    """Read a file into a list of lines.

    A missing or unreadable file yields a single empty line.

    Args:
        filename: Path of the file to read.

    Returns:
        The file's lines without terminators, never empty.
    """
    try:
        with open(filename, 'r', encoding=ENCODING, errors=ERRORS, newline='') as f:
            content = f.read()
    except FileNotFoundError:
        logger.info(f"{filename} does not exist, starting with an empty document")
        return [""]
    except OSError as e:
        logger.warning(f"Could not read {filename}: {e}")
        return [""]
    return LineBuffer.from_text(content).lines


def _file_mode(filename: str) -> int:
    """Permission bits for the saved file.

    An existing file keeps its mode; a new one gets what a plain newly
    created file would get under the current umask.
    """
    try:
        return stat.S_IMODE(os.stat(filename).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return EditorConstants.NEW_FILE_MODE & ~umask


def write_text(filename: str, content: str) -> None:
    """Write content to a file atomically.

    The data goes to a temporary file in the target directory which is
    then renamed over the target.

    Args:
        filename: Destination path.
        content: Full file content.

    Raises:
        OSError: if the file cannot be written.
    """
    dir_name = os.path.dirname(filename) or '.'
    with tempfile.NamedTemporaryFile(mode='w', encoding=ENCODING, errors=ERRORS,
                                     newline='', dir=dir_name,
                                     prefix='.' + os.path.basename(filename),
                                     suffix=EditorConstants.TEMP_SAVE_SUFFIX,
                                     delete=False) as temp_file:
        temp_filename = temp_file.name
        try:
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        except OSError:
            temp_file.close()
            os.remove(temp_filename)
            raise
    try:
        os.chmod(temp_filename, _file_mode(filename))
        os.replace(temp_filename, filename)
    except OSError:
        try:
            os.remove(temp_filename)
        except OSError:
            pass
        raise
