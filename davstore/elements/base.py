#!/usr/bin/env python
import sys
from typing import ClassVar
from typing import List
from typing import Optional
from typing import Union

from lxml import etree
from lxml.etree import _Element

from davstore.lib.namespace import nsmap

if sys.version_info < (3, 9):
    from typing import Iterable
else:
    from collections.abc import Iterable

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class BaseElement:
    """
    An XML element in a request body.  Elements are composed with ``+``:

        dav.Propfind() + (dav.Prop() + [dav.GetContentType()])

    The request bodies sent by the storage client are pure structure,
    so elements carry no text and no attributes.  The ``tag`` class
    attribute doubles as the Clark-notation name to look for when
    parsing responses.
    """

    tag: ClassVar[Optional[str]] = None

    def __init__(self) -> None:
        self.children: List[BaseElement] = []

    def __add__(self, other: Union["BaseElement", Iterable["BaseElement"]]) -> Self:
        return self.append(other)

    def __str__(self) -> str:
        return etree.tostring(self.xmlelement(), encoding="unicode", pretty_print=True)

    def xmlelement(self) -> _Element:
        if self.tag is None:
            raise ValueError("%s has no tag" % self.__class__.__name__)
        root = etree.Element(self.tag, nsmap=nsmap)
        for child in self.children:
            root.append(child.xmlelement())
        return root

    def append(self, element: Union["BaseElement", Iterable["BaseElement"]]) -> Self:
        if isinstance(element, Iterable):
            self.children.extend(element)
        else:
            self.children.append(element)
        return self

    @classmethod
    def localname(cls) -> str:
        return etree.QName(cls.tag).localname


class PropertyElement(BaseElement):
    """A live DAV property, as named in a PROPFIND"""

    pass
