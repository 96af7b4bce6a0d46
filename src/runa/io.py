"""
Module for loading DNA test instances stored as `.adn` files.

Instances live in one directory, configured through the ``GENOME_DATA``
environment variable, and are named ``Inst_<size>_<k>.adn`` where ``size`` is
the zero-padded length of the first sequence.
"""
from pathlib import Path
from re import compile as regex
from typing import Generator, Union

from runa.dna import DnaBlock
from runa.utils.resources import RESOURCES


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class InstanceNotFoundError(FileNotFoundError):
    """Raised when no instance file matches the request."""


# Constants ------------------------------------------------------------------------------------------------------------
SECONDARY_SIZES = (7, 8, 13, 45, 32, 56, 89, 76, 77, 3, 20, 6)
_INSTANCE_NAME = regex(r'^Inst_(\d+)_(\d+)\.adn$')


# Functions ------------------------------------------------------------------------------------------------------------
def _data_dir(data_dir: Union[str, Path, None]) -> Path:
    return Path(data_dir) if data_dir is not None else RESOURCES.genome_data


def instance_name(size: int, k: int) -> str:
    """File name of the instance of a given size and secondary number."""
    return f'Inst_{size:07d}_{k}.adn'


def read_test_inst(filename: str, data_dir: Union[str, Path] = None) -> DnaBlock:
    """
    Reads a test instance by file name.

    Args:
        filename: Name of the file inside the data directory.
        data_dir: Directory to read from, ``GENOME_DATA`` when omitted.

    Raises:
        InstanceNotFoundError: If the file does not exist.
        InstanceFormatError: If the file cannot be parsed.
    """
    path = _data_dir(data_dir) / filename
    if not path.is_file(): raise InstanceNotFoundError(f'No instance file at {path}')
    return DnaBlock.parse(path.read_text())


def read_test_inst_of_size(size: int, data_dir: Union[str, Path] = None) -> DnaBlock:
    """
    Reads the first existing instance of a given size.

    The usual secondary numbers are tried in order before any other file of that size.
    """
    root = _data_dir(data_dir)
    for k in SECONDARY_SIZES:
        if (path := root / instance_name(size, k)).is_file(): return DnaBlock.parse(path.read_text())
    for s, _, path in list_instances(root):
        if s == size: return DnaBlock.parse(path.read_text())
    raise InstanceNotFoundError(f'No instance of size {size} in {root}')


def list_instances(data_dir: Union[str, Path] = None) -> list[tuple[int, int, Path]]:
    """Lists ``(size, k, path)`` for every instance file, ordered by size then secondary number."""
    root = _data_dir(data_dir)
    if not root.is_dir(): raise InstanceNotFoundError(f'Instance directory {root} does not exist')
    found = []
    for path in root.iterdir():
        if match := _INSTANCE_NAME.match(path.name): found.append((int(match[1]), int(match[2]), path))
    return sorted(found)


def read_test_insts_all(data_dir: Union[str, Path] = None) -> Generator[tuple[int, DnaBlock], None, None]:
    """Lazily yields ``(size, block)`` for every instance, parsing each file on demand."""
    for size, _, path in list_instances(data_dir):
        yield size, DnaBlock.parse(path.read_text())


def read_test_insts_by_size(data_dir: Union[str, Path] = None) -> Generator[tuple[int, DnaBlock], None, None]:
    """Lazily yields one ``(size, block)`` per distinct instance size, smallest first."""
    root = _data_dir(data_dir)
    sizes = sorted({size for size, _, _ in list_instances(root)})
    for size in sizes:
        yield size, read_test_inst_of_size(size, root)
