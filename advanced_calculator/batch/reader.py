"""Load expressions from a text file or from the first text file of an archive."""
from pathlib import Path
import tarfile
import tempfile
from typing import Callable, Dict, List
import zipfile

import py7zr

from advanced_calculator.common.logger import logger


def _read_zip(archive_path: Path) -> str:
    with zipfile.ZipFile(archive_path, "r") as zf:
        names = [name for name in zf.namelist() if name.endswith(".txt")]
        if not names:
            raise ValueError(f"📄❌ {archive_path.name} holds no expression file")
        return zf.read(names[0]).decode("utf-8")


def _read_tar_xz(archive_path: Path) -> str:
    with tarfile.open(archive_path, "r:xz") as tf:
        members = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
        if not members:
            raise ValueError(f"📄❌ {archive_path.name} holds no expression file")
        return tf.extractfile(members[0]).read().decode("utf-8")


def _read_7z(archive_path: Path) -> str:
    # py7zr only extracts to disk
    with py7zr.SevenZipFile(archive_path, mode="r") as archive:
        names = [name for name in archive.getnames() if name.endswith(".txt")]
        if not names:
            raise ValueError(f"📄❌ {archive_path.name} holds no expression file")
        with tempfile.TemporaryDirectory() as tmpdir:
            archive.extract(path=tmpdir, targets=[names[0]])
            return (Path(tmpdir) / names[0]).read_text(encoding="utf-8")


# Archive suffix -> reader returning the first .txt member
ARCHIVE_READERS: Dict[str, Callable[[Path], str]] = {
    ".zip": _read_zip,
    ".tar.xz": _read_tar_xz,
    ".7z": _read_7z,
}


def extract_archive(archive_path: Path) -> str:
    """
    Return the text of the first ``.txt`` member of an expression archive.

    :param Path archive_path: ``.zip``, ``.tar.xz`` or ``.7z`` file

    :return: Member content
    :rtype: str
    :raises ValueError: If the suffix is not one of ``ARCHIVE_READERS`` or no member ends in ``.txt``
    """
    suffix = "".join(archive_path.suffixes[-2:]) if archive_path.suffixes[-2:] == [".tar", ".xz"] else archive_path.suffix
    reader = ARCHIVE_READERS.get(suffix)
    if reader is None:
        raise ValueError(f"📄❌ Unsupported archive format: {''.join(archive_path.suffixes)}")
    return reader(archive_path)


def load_expressions(input_file: Path) -> List[str]:
    """
    Read every non-empty line of a text file or archive.

    :param Path input_file: Path to a .txt file or a supported archive

    :return: Stripped, non-empty expression lines
    :rtype: List[str]
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    if input_file.suffix == ".txt":
        content = input_file.read_text(encoding="utf-8")
    else:
        content = extract_archive(input_file)

    lines = [line.strip() for line in content.splitlines() if line.strip()]
    logger.info(f"📄 Loaded {len(lines)} expressions from {input_file}")
    return lines
