import re

# Characters outside the XML 1.0 Char production
_XML_ILLEGAL = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def has_xml_illegal(value: str) -> bool:
    return _XML_ILLEGAL.search(value) is not None


def strip_xml_illegal(value: str) -> str:
    return _XML_ILLEGAL.sub("", value)
