#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from .base import PropertyElement
from davstore.lib.namespace import ns


# Operations
class Propfind(BaseElement):
    tag: ClassVar[str] = ns("D", "propfind")


class PropName(BaseElement):
    tag: ClassVar[str] = ns("D", "propname")


# Components / Data
class Prop(BaseElement):
    tag: ClassVar[str] = ns("D", "prop")


# Properties
class CreationDate(PropertyElement):
    tag: ClassVar[str] = ns("D", "creationdate")


class GetContentLength(PropertyElement):
    tag: ClassVar[str] = ns("D", "getcontentlength")


class GetLastModified(PropertyElement):
    tag: ClassVar[str] = ns("D", "getlastmodified")


class GetContentType(PropertyElement):
    tag: ClassVar[str] = ns("D", "getcontenttype")


# Multi-status response
class MultiStatus(BaseElement):
    tag: ClassVar[str] = ns("D", "multistatus")


class Response(BaseElement):
    tag: ClassVar[str] = ns("D", "response")


class Href(BaseElement):
    tag: ClassVar[str] = ns("D", "href")


class PropStat(BaseElement):
    tag: ClassVar[str] = ns("D", "propstat")


class Status(BaseElement):
    tag: ClassVar[str] = ns("D", "status")
