from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterable

from pydantic import BaseModel, Field, PrivateAttr

from .errors import InvalidArgumentError

ROOT_TAG = "configuration"
APP_SETTINGS = "appSettings"
CONNECTION_STRINGS = "connectionStrings"

# Collection directives understood inside a section; everything else is left alone.
_DIRECTIVES = ("add", "remove", "clear")

# Characters outside the XML 1.0 Char production cannot be written to an attribute.
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class ConnectionStringRecord(BaseModel):
    name: str
    connection_string: str
    provider_name: str = ""


class SettingsDocument(BaseModel):
    """
    Mirrors the on-disk app.config schema:
      <configuration>
        <appSettings>
          <add key="..." value="..." />
        </appSettings>
        <connectionStrings>
          <add name="..." connectionString="..." providerName="..." />
        </connectionStrings>
      </configuration>

    The parsed element tree is kept alongside the two sections so that other
    sections, attributes and comments are written back untouched.
    """

    app_settings: dict[str, str] = Field(default_factory=dict)
    connection_strings: dict[str, ConnectionStringRecord] = Field(default_factory=dict)

    _root: ET.Element | None = PrivateAttr(default=None)

    @classmethod
    def empty(cls) -> "SettingsDocument":
        doc = cls()
        doc._root = ET.Element(ROOT_TAG)
        doc._section(APP_SETTINGS)
        doc._section(CONNECTION_STRINGS)
        return doc

    @classmethod
    def from_xml(cls, data: bytes) -> "SettingsDocument":
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        root = ET.fromstring(data, parser=parser)
        if root.tag != ROOT_TAG:
            raise InvalidArgumentError(f"Expected <{ROOT_TAG}> root element, found <{root.tag}>")

        doc = cls()
        doc._root = root

        for el in _directives(doc._section(APP_SETTINGS)):
            if el.tag == "clear":
                doc.app_settings.clear()
            elif el.tag == "remove":
                doc.app_settings.pop(el.get("key", ""), None)
            else:
                key = el.get("key", "")
                doc.app_settings.pop(key, None)
                doc.app_settings[key] = el.get("value", "")

        for el in _directives(doc._section(CONNECTION_STRINGS)):
            if el.tag == "clear":
                doc.connection_strings.clear()
            elif el.tag == "remove":
                doc.connection_strings.pop(el.get("name", ""), None)
            else:
                rec = ConnectionStringRecord(
                    name=el.get("name", ""),
                    connection_string=el.get("connectionString", ""),
                    provider_name=el.get("providerName", ""),
                )
                doc.connection_strings.pop(rec.name, None)
                doc.connection_strings[rec.name] = rec

        return doc

    def to_xml(self) -> bytes:
        app = self._section(APP_SETTINGS)
        _drop_directives(app)
        for key, value in self.app_settings.items():
            ET.SubElement(app, "add", {"key": key, "value": value})

        conn = self._section(CONNECTION_STRINGS)
        _drop_directives(conn)
        for rec in self.connection_strings.values():
            attrs = {"name": rec.name, "connectionString": rec.connection_string}
            if rec.provider_name:
                attrs["providerName"] = rec.provider_name
            ET.SubElement(conn, "add", attrs)

        ET.indent(self._root, space="  ")
        return ET.tostring(self._root, encoding="utf-8", xml_declaration=True) + b"\n"

    def get_app_setting(self, key: str) -> str | None:
        return self.app_settings.get(key)

    def put_app_setting(self, key: str, value: str) -> None:
        _check_xml_text("key", key)
        _check_xml_text("value", value)
        # remove-then-add: the entry moves to the end of the section
        self.app_settings.pop(key, None)
        self.app_settings[key] = value

    def get_connection_string(self, name: str) -> ConnectionStringRecord | None:
        return self.connection_strings.get(name)

    def put_connection_string(self, record: ConnectionStringRecord) -> None:
        _check_xml_text("name", record.name)
        _check_xml_text("connection string", record.connection_string)
        _check_xml_text("provider name", record.provider_name)
        self.connection_strings.pop(record.name, None)
        self.connection_strings[record.name] = record

    def _section(self, tag: str) -> ET.Element:
        if self._root is None:
            self._root = ET.Element(ROOT_TAG)
        el = self._root.find(tag)
        if el is None:
            el = ET.SubElement(self._root, tag)
        return el


def _check_xml_text(what: str, text: str) -> None:
    bad = _INVALID_XML_CHARS.search(text)
    if bad is not None:
        raise InvalidArgumentError(
            f"The {what} contains character {bad.group()!r} at position {bad.start()}, which XML cannot represent"
        )


def _directives(section: ET.Element) -> Iterable[ET.Element]:
    return [el for el in section if el.tag in _DIRECTIVES]


def _drop_directives(section: ET.Element) -> None:
    for el in list(_directives(section)):
        section.remove(el)
