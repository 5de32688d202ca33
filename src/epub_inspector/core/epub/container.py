"""
Module de décodage de META-INF/container.xml.

Responsabilité unique: produire la liste ordonnée des rootfiles déclarés.
Seuls ``full-path`` et ``media-type`` des éléments ``rootfiles/rootfile``
sont extraits; le reste du document est ignoré.
"""

import logging
from typing import Optional

from lxml import etree

from ...config import CONTAINER_PATH
from ..errors import (
    EntryNotFoundError,
    MalformedContainerError,
    MissingContainerError,
    NoRootfileError,
)
from .archive import ArchiveIndex, LogSink
from .models import Container, RootfileDescriptor
from .xml_utils import attr, children, parse_xml

logger = logging.getLogger(__name__)


def decode_container(data: bytes) -> Container:
    """Décode le XML du conteneur (sans vérifier le nombre de rootfiles)."""
    root = parse_xml(data)
    rootfiles = []
    for group in children(root, "rootfiles"):
        for element in children(group, "rootfile"):
            rootfiles.append(
                RootfileDescriptor(
                    full_path=attr(element, "full-path"),
                    media_type=attr(element, "media-type"),
                )
            )
    return Container(rootfiles=tuple(rootfiles))


def parse_container(archive: ArchiveIndex, log: Optional[LogSink] = None) -> Container:
    """
    Lit et décode le conteneur de l'archive.

    Args:
        archive: Archive ouverte
        log: Logger optionnel recevant les événements de trace

    Returns:
        Container avec au moins un rootfile

    Raises:
        MissingContainerError: Si container.xml est absent
        MalformedContainerError: Si le XML ne peut pas être décodé
        NoRootfileError: Si aucun rootfile n'est déclaré
    """
    log = log or logger
    try:
        data = archive.read_all(CONTAINER_PATH)
    except EntryNotFoundError:
        log.debug("not an epub (no container)")
        raise MissingContainerError(archive.name, CONTAINER_PATH) from None

    try:
        container = decode_container(data)
    except etree.XMLSyntaxError as e:
        log.debug("unmarshal container: %s", e)
        raise MalformedContainerError(
            archive.name, f"unmarshalling container: {e}", path=CONTAINER_PATH
        ) from e

    if not container.rootfiles:
        log.debug("not an epub (no rootfile)")
        raise NoRootfileError(archive.name, CONTAINER_PATH)

    log.debug("container declares %d rootfile(s)", len(container.rootfiles))
    return container
