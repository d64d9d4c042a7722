"""Field labels and their canonical common form.

A label has a *proper* form (as the user typed it, used for display) and
a *common* form (lowercase, alphanumerics only) that is the sole key used
for equality and dictionary lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from notekit.domain.text import clean_and_trim, to_common

# Common forms that collide with inline URLs in free text.
RESERVED_COMMON_FORMS: frozenset[str] = frozenset({"http", "https", "ftp", "mailto"})

MAX_LABEL_LENGTH = 48

# Well-known common forms referenced throughout the engine.
TITLE = "title"
BODY = "body"
DATE = "date"
DATE_ADDED = "dateadded"
DATE_MODIFIED = "datemodified"
SEQ = "seq"
STATUS = "status"
TAGS = "tags"
LINK = "link"
AUTHOR = "author"
RANK = "rank"
LEVEL = "level"
KLASS = "class"
INDEX = "index"
RATING = "rating"
RECURS = "recurs"
TIMESTAMP = "timestamp"
TEASER = "teaser"
AKA = "aka"
TYPE = "type"
WORK_TITLE = "worktitle"
WORK_TYPE = "worktype"

# Labels the dictionary accepts even when locked, for auto-stamping.
LOCK_EXEMPT: frozenset[str] = frozenset({DATE_ADDED, DATE_MODIFIED})


def normalize_label(text: str) -> str:
    """Return the common form of a label string.

    Examples:
        >>> normalize_label("Date Modified")
        'datemodified'
        >>> normalize_label(normalize_label("Seq #"))
        'seq'
    """
    return to_common(text)


@dataclass(eq=False)
class FieldLabel:
    """A field label in proper and common forms.

    Equality, hashing and ordering use :attr:`common_form` only.
    """

    proper_form: str = ""
    common_form: str = field(default="", init=False)
    valid_label: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.set(self.proper_form)

    def set(self, label: str) -> None:
        """Replace the label text and recompute its common form and validity."""
        self.proper_form = clean_and_trim(label)
        self.common_form = to_common(label)
        self.valid_label = is_valid_common_form(self.common_form)

    @property
    def is_empty(self) -> bool:
        return not self.proper_form

    @property
    def has_data(self) -> bool:
        return bool(self.proper_form)

    def copy(self) -> FieldLabel:
        return FieldLabel(self.proper_form)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldLabel):
            return self.common_form == other.common_form
        if isinstance(other, str):
            return self.common_form == to_common(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.common_form)

    def __lt__(self, other: FieldLabel) -> bool:
        return self.common_form < other.common_form

    def __str__(self) -> str:
        return self.proper_form


def is_valid_common_form(common: str) -> bool:
    """Whether *common* may be used as a field label."""
    if not common:
        return False
    if common in RESERVED_COMMON_FORMS:
        return False
    return len(common) <= MAX_LABEL_LENGTH
