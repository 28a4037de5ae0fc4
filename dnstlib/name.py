import struct
from .common import MAX_LABEL_LEN, MAX_NAME_LEN


class Name:

    """Class to represent absolute domain names"""

    labels = None

    def __init__(self, labels):
        self.labels = labels

    def wire(self, canonical_form=False):
        """Return uncompressed wire format of domain name."""
        wire = b''
        for label in self.labels:
            if canonical_form:
                label = label.lower()
            wire += struct.pack('B', len(label)) + label
        return wire

    def text(self):
        """Return textual representation of domain name."""
        result_list = []
        for label in self.labels:
            result_list.append(escape_label(label))
        if result_list == ['']:
            return "."
        else:
            return ".".join(result_list)

    def __eq__(self, other):
        if not isinstance(other, Name):
            return NotImplemented
        return self.wire(canonical_form=True) == other.wire(canonical_form=True)

    def __hash__(self):
        return hash(self.wire(canonical_form=True))

    def __repr__(self):
        return "<Name: {}>".format(self.text())


def escape_label(label):
    """Return presentation format of a single label"""
    out = []
    for c in label:
        if c in b'.\\"();$@':
            out.append('\\' + chr(c))
        elif 0x21 <= c <= 0x7e:
            out.append(chr(c))
        else:
            out.append("\\{:03d}".format(c))
    return ''.join(out)


def _read_escape(text, pos):
    """Decode an escape sequence starting after the backslash at pos.
    Returns (octet value, next position)."""
    if pos >= len(text):
        raise ValueError("illegal escape sequence")
    if text[pos].isdigit():
        digits = text[pos:pos+3]
        if len(digits) != 3 or not all(c in '0123456789' for c in digits):
            raise ValueError("illegal escape sequence")
        value = int(digits)
        if value > 255:
            raise ValueError("illegal escape sequence")
        return value, pos + 3
    c = text[pos]
    if ord(c) > 0x7e or ord(c) < 0x20:
        raise ValueError("illegal escape sequence")
    return ord(c), pos + 1


def name_from_text(input):
    """
    Return a Name() object corresponding to textual domain name.

    Names are always taken as absolute: a missing trailing dot is
    implied. Raises ValueError with a description of the problem if the
    text isn't a valid domain name.
    """
    if input == "":
        raise ValueError("unexpected end of input")
    if input == ".":
        return Name([b''])

    labellist = []
    label = bytearray()
    pos = 0
    while pos < len(input):
        c = input[pos]
        if c == '.':
            if not label:
                raise ValueError("an empty label was encountered")
            labellist.append(bytes(label))
            label = bytearray()
            pos += 1
            continue
        if c == '\\':
            value, pos = _read_escape(input, pos + 1)
        elif ord(c) > 0x7e or ord(c) <= 0x20:
            raise ValueError("illegal character '{}'".format(c))
        else:
            value = ord(c)
            pos += 1
        label.append(value)
        if len(label) > MAX_LABEL_LEN:
            raise ValueError("label length limit exceeded")

    if label:
        labellist.append(bytes(label))
    labellist.append(b'')

    name = Name(labellist)
    if len(name.wire()) > MAX_NAME_LEN:
        raise ValueError("long domain name")
    return name
