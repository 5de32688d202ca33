"""
Helpers de décodage XML (lxml).

Les éléments et attributs sont appariés par nom local: un document OPF
avec ou sans namespace se décode de la même façon, et tout élément ou
attribut inconnu est simplement ignoré.
"""

from typing import List, Optional

from lxml import etree

_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
)


def parse_xml(data: bytes) -> etree._Element:
    """Décode un document XML; lève ``etree.XMLSyntaxError`` si mal formé."""
    return etree.fromstring(data, parser=_PARSER)


def local_name(element: etree._Element) -> str:
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def children(element: Optional[etree._Element], name: str) -> List[etree._Element]:
    """Enfants directs portant le nom local ``name``, dans l'ordre du document."""
    if element is None:
        return []
    return [child for child in element if local_name(child) == name]


def first_child(element: Optional[etree._Element], name: str) -> Optional[etree._Element]:
    for child in children(element, name):
        return child
    return None


def attr(element: Optional[etree._Element], name: str) -> str:
    """
    Valeur d'un attribut par nom local.

    L'attribut sans namespace est prioritaire (``id`` avant ``xml:id``,
    ``scheme`` avant ``opf:scheme``).
    """
    if element is None:
        return ""
    value = element.get(name)
    if value is not None:
        return value
    for key, value in element.attrib.items():
        if key.startswith("{") and etree.QName(key).localname == name:
            return value
    return ""


def text(element: Optional[etree._Element]) -> str:
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def child_text(element: Optional[etree._Element], name: str) -> str:
    return text(first_child(element, name))
