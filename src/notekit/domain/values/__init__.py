"""Field value hierarchy.

:class:`StringValue` is the base; every other value refines how text is
parsed, sorted and written back.
"""

from notekit.domain.values.base import ListValue, MultiValues, StringValue
from notekit.domain.values.contact import (
    AddressValue,
    DirectionsValue,
    EmailValue,
    LinkValue,
    PhoneValue,
)
from notekit.domain.values.dates import DateTimeValue, DateValue, RecursValue, TimestampValue
from notekit.domain.values.labeled import (
    IntWithLabelConfig,
    LevelValue,
    RankValue,
    RankValueConfig,
    StatusValue,
    StatusValueConfig,
)
from notekit.domain.values.lists import (
    AKAValue,
    BacklinkValue,
    IndexValue,
    NotePointerListValue,
    TagsValue,
    TagValue,
    WikilinkValue,
)
from notekit.domain.values.numeric import (
    BooleanValue,
    DurationValue,
    IntValue,
    MinutesToReadValue,
    RatingValue,
)
from notekit.domain.values.people import ArtistValue, AuthorValue, PersonName
from notekit.domain.values.seq import SeqSingleValue, SeqValue
from notekit.domain.values.text import (
    ComboValue,
    KlassValue,
    LongTextValue,
    PickListValue,
    ShortIdValue,
    TextFormatValue,
    TitleValue,
    WorkTitleValue,
    WorkTypeValue,
)

__all__ = [
    "AKAValue",
    "AddressValue",
    "ArtistValue",
    "AuthorValue",
    "BacklinkValue",
    "BooleanValue",
    "ComboValue",
    "DateTimeValue",
    "DateValue",
    "DirectionsValue",
    "DurationValue",
    "EmailValue",
    "IndexValue",
    "IntValue",
    "IntWithLabelConfig",
    "KlassValue",
    "LevelValue",
    "LinkValue",
    "ListValue",
    "LongTextValue",
    "MinutesToReadValue",
    "MultiValues",
    "NotePointerListValue",
    "PersonName",
    "PhoneValue",
    "PickListValue",
    "RankValue",
    "RankValueConfig",
    "RatingValue",
    "RecursValue",
    "SeqSingleValue",
    "SeqValue",
    "ShortIdValue",
    "StatusValue",
    "StatusValueConfig",
    "StringValue",
    "TagValue",
    "TagsValue",
    "TextFormatValue",
    "TimestampValue",
    "TitleValue",
    "WikilinkValue",
    "WorkTitleValue",
    "WorkTypeValue",
]
