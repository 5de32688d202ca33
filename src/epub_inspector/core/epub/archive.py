"""
Module d'accès à l'archive.

Responsabilité unique: indexer les entrées d'une archive ZIP et les lire
intégralement en mémoire. Aucune connaissance de la sémantique EPUB.
"""

import logging
import os
import zipfile
from dataclasses import dataclass, field
from typing import IO, BinaryIO, Dict, List, Optional, Union

from ..errors import ArchiveReadError, EntryNotFoundError, NotAnArchiveError

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, BinaryIO]
LogSink = Union[logging.Logger, logging.LoggerAdapter]


@dataclass(frozen=True)
class ArchiveEntry:
    """Entrée nommée de l'archive."""

    name: str
    size: int
    compressed_size: int
    _info: zipfile.ZipInfo = field(repr=False, compare=False)
    _zip: zipfile.ZipFile = field(repr=False, compare=False)

    @property
    def encrypted(self) -> bool:
        return bool(self._info.flag_bits & 0x1)

    def open(self) -> IO[bytes]:
        """Ouvre un flux de lecture décompressé sur l'entrée."""
        return self._zip.open(self._info)


def source_name(source: Source) -> str:
    if isinstance(source, (str, bytes)) or hasattr(source, "__fspath__"):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


class ArchiveIndex:
    """
    Index nom -> entrée d'une archive ouverte.

    L'index est construit une seule fois à l'ouverture; ``lookup`` est une
    simple recherche dans un dictionnaire. L'archive reste ouverte jusqu'à
    l'appel de ``close``.
    """

    def __init__(self, name: str, zip_file: zipfile.ZipFile):
        self.name = name
        self._zip = zip_file
        self._entries: Dict[str, ArchiveEntry] = {}
        for info in zip_file.infolist():
            self._entries[info.filename] = ArchiveEntry(
                name=info.filename,
                size=info.file_size,
                compressed_size=info.compress_size,
                _info=info,
                _zip=zip_file,
            )
        self._closed = False

    @classmethod
    def open(cls, source: Source, log: Optional[LogSink] = None) -> "ArchiveIndex":
        """
        Ouvre une archive depuis un chemin ou un flux binaire seekable.

        Args:
            source: Chemin du fichier ou objet fichier binaire
            log: Logger optionnel recevant les événements de trace

        Returns:
            ArchiveIndex prêt à l'emploi

        Raises:
            ArchiveReadError: Si le fichier ne peut pas être lu
            NotAnArchiveError: Si le contenu n'est pas une archive ZIP
        """
        log = log or logger
        name = source_name(source)
        try:
            zip_file = zipfile.ZipFile(source, "r")
        except (zipfile.BadZipFile, NotImplementedError, ValueError, EOFError) as e:
            # Répertoire central illisible ou version ZIP non supportée
            log.debug("not an archive: %s", e)
            raise NotAnArchiveError(name, f"open zip: {e}") from e
        except OSError as e:
            log.debug("cannot open archive: %s", e)
            raise ArchiveReadError(name, f"open: {e}") from e

        index = cls(name, zip_file)
        log.debug("indexed %d entries", len(index))
        return index

    def lookup(self, name: str) -> Optional[ArchiveEntry]:
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> List[str]:
        return list(self._entries)

    def read_all(self, name: str) -> bytes:
        """
        Lit intégralement une entrée en mémoire.

        Les erreurs de décompression (``zipfile.BadZipFile`` sur CRC invalide,
        ``zlib.error``, ``NotImplementedError`` pour une compression inconnue)
        sont propagées telles quelles.

        Raises:
            EntryNotFoundError: Si l'entrée n'existe pas
            ArchiveReadError: Si l'entrée est chiffrée
        """
        entry = self._entries.get(name)
        if entry is None:
            raise EntryNotFoundError(self.name, name)
        if entry.encrypted:
            raise ArchiveReadError(self.name, f"read {name}: encrypted entry", path=name)
        with entry.open() as stream:
            return stream.read()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Libère le descripteur de l'archive. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._zip.close()

    def __enter__(self) -> "ArchiveIndex":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
