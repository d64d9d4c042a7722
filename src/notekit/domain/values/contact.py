"""Links, e-mail addresses, phone numbers, street addresses and directions."""

from __future__ import annotations

from urllib.parse import quote, unquote

from notekit.domain.text import is_digits
from notekit.domain.values.base import StringValue

MAPS_URL = "https://maps.apple.com/"
DIRECTIONS_REQUESTED = "directions requested"

_SCHEMES = ("https://", "http://", "ftp://", "file://", "mailto:")


class LinkValue(StringValue):
    """A URL; sorts without its scheme or ``www.`` prefix."""

    @property
    def sort_key(self) -> str:
        key = self.value.lower()
        for scheme in _SCHEMES:
            if key.startswith(scheme):
                key = key[len(scheme) :]
                break
        if key.startswith("www."):
            key = key[4:]
        return key.rstrip("/")

    @property
    def url(self) -> str:
        """The link with ``https://`` assumed when no scheme was given."""
        if not self.value:
            return ""
        if "://" in self.value or self.value.startswith("mailto:"):
            return self.value
        return "https://" + self.value


class EmailValue(StringValue):
    """An e-mail address, with or without a ``mailto:`` prefix."""

    @property
    def address(self) -> str:
        if self.value.lower().startswith("mailto:"):
            return self.value[len("mailto:") :]
        return self.value

    @property
    def sort_key(self) -> str:
        return self.address.lower()

    @property
    def url(self) -> str:
        return f"mailto:{self.address}" if self.value else ""


class PhoneValue(StringValue):
    """A phone number, optionally written as ``[display](tel:digits)``."""

    def set(self, text: str) -> None:
        display: list[str] = []
        tel: list[str] = []
        derived: list[str] = []
        stage = "display"
        for c in text.strip():
            if stage == "display":
                if c == "[":
                    continue
                if c == "]":
                    stage = "transition"
                    continue
                display.append(c)
                if c in "+," or is_digits(c):
                    derived.append(c)
            elif stage == "transition":
                if c == "(":
                    stage = "link"
            elif c in "+," or is_digits(c):
                tel.append(c)
        self.value = "".join(display).strip()
        self.tel_value = "".join(tel) or "".join(derived)

    @property
    def sort_key(self) -> str:
        return self.tel_value

    def value_to_write(self) -> str:
        if not self.value or not self.tel_value:
            return self.value
        return f"[{self.value}](tel:{self.tel_value})"

    def value_to_display(self) -> str:
        return self.value

    @property
    def url(self) -> str:
        return f"tel:{self.tel_value}" if self.tel_value else ""


class AddressValue(StringValue):
    """A street address that can be turned into a maps link."""

    @property
    def encoded(self) -> str:
        return quote(self.value)

    def parameter_string(self, parm: str, first: bool = True) -> str:
        sep = "?" if first else "&"
        return f"{sep}{parm}={self.encoded}"

    @property
    def link(self) -> str:
        return MAPS_URL + self.parameter_string("address") if self.value else ""


class DirectionsValue(StringValue):
    """Directions between two addresses, stored as maps query parameters."""

    def set_route(self, source: AddressValue | None, destination: AddressValue | None) -> None:
        self.value = ""
        if destination is None or destination.is_empty:
            return
        first = True
        if source is not None and source.has_data:
            self.value = source.parameter_string("saddr", first=True)
            first = False
        self.value += destination.parameter_string("daddr", first=first)

    @property
    def directions_requested(self) -> bool:
        return self.value.lower() == DIRECTIONS_REQUESTED

    @property
    def link(self) -> str:
        if not self.value or self.directions_requested:
            return ""
        return MAPS_URL + self.value

    def value_to_display(self) -> str:
        if not self.value.startswith(("?", "&")):
            return self.value
        pieces: list[str] = []
        for component in self.value.lstrip("?").split("&"):
            name, _, encoded = component.partition("=")
            address = unquote(encoded)
            if name == "saddr":
                pieces.append(f"from {address}")
            elif name == "daddr":
                pieces.append(f"to {address}")
            else:
                pieces.append(f"{name} = {address}")
        return "; ".join(pieces)
