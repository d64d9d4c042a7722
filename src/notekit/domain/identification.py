"""Note identity: identifier composition, derived file names and attachments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from notekit.domain.text import to_common, to_common_file_name, to_readable_filename
from notekit.domain.types import NoteIdentifierRule

if TYPE_CHECKING:
    from notekit.domain.note import Note

logger = logging.getLogger(__name__)


@dataclass
class NoteIdentification:
    """Derived identifiers of one note.

    ``basis`` is the text the unique id is built from; ``text`` is the
    display form, which may use a different composition rule. All other
    identifiers are recomputed by :meth:`derive`.
    """

    basis: str = ""
    text: str = ""
    dupe_counter: int = 0
    basis_plus_dupe: str = field(default="", init=False)
    common_id: str = field(default="", init=False)
    readable_file_name: str = field(default="", init=False)
    common_file_name: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.derive()

    def set_basis(self, basis: str) -> None:
        self.basis = basis
        self.derive()

    def avoid_duplicate(self) -> None:
        """Bump the duplicate counter (2, 3, ...) so the id no longer collides."""
        self.dupe_counter = 2 if self.dupe_counter < 2 else self.dupe_counter + 1
        self.derive()

    def derive(self) -> None:
        self.basis_plus_dupe = self.basis
        if self.dupe_counter >= 2:
            self.basis_plus_dupe = f"{self.basis} {self.dupe_counter}"
        self.common_id = to_common(self.basis_plus_dupe)
        self.readable_file_name = to_readable_filename(self.basis_plus_dupe)
        self.common_file_name = to_common_file_name(self.basis_plus_dupe)

    @property
    def is_empty(self) -> bool:
        return not self.common_id

    @property
    def has_data(self) -> bool:
        return bool(self.common_id)

    def copy(self) -> NoteIdentification:
        return NoteIdentification(basis=self.basis, text=self.text, dupe_counter=self.dupe_counter)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteIdentification):
            return NotImplemented
        return self.common_id == other.common_id

    def __lt__(self, other: NoteIdentification) -> bool:
        return self.common_id < other.common_id

    def __hash__(self) -> int:
        return hash(self.common_id)


def _compose(rule: NoteIdentifierRule, title: str, aux: str, sep: str) -> str:
    if rule == NoteIdentifierRule.AUX_ONLY:
        return aux
    if not aux or rule == NoteIdentifierRule.TITLE_ONLY:
        return title
    if rule == NoteIdentifierRule.TITLE_BEFORE_AUX:
        return f"{title}{sep}{aux}"
    return f"{aux}{sep}{title}"


@dataclass
class NoteIdentifier:
    """Collection-wide rules for composing note identifiers.

    The unique id always joins title and aux with a single space; the
    display text uses ``text_id_sep`` when one is configured.
    """

    unique_id_rule: NoteIdentifierRule = NoteIdentifierRule.TITLE_ONLY
    aux_field: str = ""
    text_id_rule: NoteIdentifierRule = NoteIdentifierRule.TITLE_ONLY
    text_id_sep: str = ""

    @property
    def aux_common(self) -> str:
        return to_common(self.aux_field)

    def uses_field(self, common_label: str) -> bool:
        """Whether a change to *common_label* requires re-identification."""
        return bool(self.aux_field) and common_label == self.aux_common

    def identify(self, note: Note, note_id: NoteIdentification) -> None:
        title = note.title.value
        aux = ""
        if self.aux_field:
            aux_field = note.get_field(self.aux_field)
            if aux_field is not None:
                aux = aux_field.value.value_to_write()
        note_id.basis = _compose(self.unique_id_rule, title, aux, " ")
        note_id.text = _compose(self.text_id_rule, title, aux, self.text_id_sep or " ")
        note_id.derive()


@dataclass
class AttachmentName:
    """File name of a note attachment: ``<note file name><sep><suffix><.ext>``."""

    prefix: str = ""
    separator: str = " | "
    suffix: str = ""
    ext: str = ""

    PREFERRED_SEPARATOR = " | "

    @property
    def full_name(self) -> str:
        return f"{self.prefix}{self.separator}{self.suffix}{self.ext}"

    @property
    def common_name(self) -> str:
        return f"{to_common_file_name(self.prefix)}-{to_common_file_name(self.suffix)}{self.ext.lower()}"

    @classmethod
    def for_note(cls, note_id: NoteIdentification, suffix: str, ext: str = "") -> AttachmentName:
        if ext and not ext.startswith("."):
            ext = "." + ext
        return cls(prefix=note_id.readable_file_name, separator=cls.PREFERRED_SEPARATOR, suffix=suffix, ext=ext)

    @classmethod
    def parse(cls, note_id: NoteIdentification, full_name: str) -> AttachmentName | None:
        """Split an existing attachment file name; None if it does not belong to the note."""
        prefix = note_id.readable_file_name
        if not prefix or not full_name.startswith(prefix):
            return None
        rest = full_name[len(prefix) :]
        separator = ""
        sep_char_found = False
        index = 0
        while index < len(rest) and (rest[index].isspace() or not rest[index].isalnum()) and rest[index] != ".":
            separator += rest[index]
            sep_char_found = sep_char_found or not rest[index].isspace()
            index += 1
        remainder = rest[index:]
        dot = remainder.rfind(".")
        suffix, ext = (remainder[:dot], remainder[dot:]) if dot > 0 else (remainder, "")
        if not sep_char_found or not suffix:
            logger.debug("Not an attachment of %r: %r", prefix, full_name)
            return None
        return cls(prefix=prefix, separator=separator, suffix=suffix, ext=ext)

    def change_note(self, note_id: NoteIdentification) -> None:
        self.prefix = note_id.readable_file_name

    def __lt__(self, other: AttachmentName) -> bool:
        return self.full_name < other.full_name

    def __str__(self) -> str:
        return self.full_name
