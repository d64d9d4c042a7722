"""Field type descriptors and the built-in type table.

A :class:`FieldType` says which labels (or explicit type hints) it applies
to and how to build a value from text. The built-in table is ordered:
more specific types come before generic fallbacks, and the first type
that applies wins.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from notekit.domain import labels as lbl
from notekit.domain.picklists import ComboList, KlassPickList, PickList, work_type_pick_list
from notekit.domain.text import to_common
from notekit.domain.values import (
    AddressValue,
    AKAValue,
    ArtistValue,
    AuthorValue,
    BacklinkValue,
    BooleanValue,
    ComboValue,
    DateTimeValue,
    DateValue,
    DirectionsValue,
    DurationValue,
    EmailValue,
    IndexValue,
    IntValue,
    IntWithLabelConfig,
    KlassValue,
    LevelValue,
    LinkValue,
    LongTextValue,
    MinutesToReadValue,
    PhoneValue,
    PickListValue,
    RankValue,
    RankValueConfig,
    RatingValue,
    RecursValue,
    SeqValue,
    ShortIdValue,
    StatusValue,
    StatusValueConfig,
    StringValue,
    TagsValue,
    TextFormatValue,
    TimestampValue,
    TitleValue,
    WikilinkValue,
    WorkTitleValue,
    WorkTypeValue,
)


@dataclass(frozen=True)
class ValueContext:
    """Per-collection and per-field state a value factory may need."""

    status_config: StatusValueConfig = field(default_factory=StatusValueConfig)
    rank_config: RankValueConfig = field(default_factory=RankValueConfig)
    level_config: IntWithLabelConfig = field(default_factory=IntWithLabelConfig)
    pick_list: PickList | None = None
    combo_list: ComboList | None = None


ValueFactory = Callable[[str, ValueContext], StringValue]
HintMatcher = Callable[[str, str], bool]


def _plain(cls: type[StringValue]) -> ValueFactory:
    def factory(text: str, ctx: ValueContext) -> StringValue:
        return cls(text)

    return factory


@dataclass(frozen=True)
class FieldType:
    """Descriptor for one kind of field.

    Attributes:
        type_string: Identity of the type, in common form; matched against
            explicit type hints.
        proper_label: Default label for fields of this type. Empty for types
            that are only chosen by hint.
        aliases: Other common-form labels this type claims.
        prefixes: Common-form label prefixes this type claims.
        hint_aliases: Other type hints that select this type.
        hint_matcher: Extra ``(common_label, hint) -> bool`` check for hints
            that only apply to particular labels.
        label_match: Whether the type may be chosen by label at all.
    """

    type_string: str
    factory: ValueFactory
    proper_label: str = ""
    aliases: frozenset[str] = frozenset()
    prefixes: tuple[str, ...] = ()
    hint_aliases: frozenset[str] = frozenset()
    hint_matcher: HintMatcher | None = None
    label_match: bool = True
    user_editable: bool = True
    is_text_block: bool = False
    pick_list_factory: Callable[[], PickList] | None = None
    uses_combo_list: bool = False

    @property
    def common_label(self) -> str:
        return to_common(self.proper_label)

    def applies_to(self, label: lbl.FieldLabel, type_hint: str | None = None) -> bool:
        """Whether this type should back a field with *label* and optional *type_hint*."""
        common = label.common_form
        if type_hint:
            hint = to_common(type_hint)
            if hint == self.type_string or hint in self.hint_aliases:
                return True
            return self.hint_matcher is not None and self.hint_matcher(common, hint)
        if not self.label_match:
            return False
        if self.common_label and common == self.common_label:
            return True
        if common in self.aliases:
            return True
        return any(common.startswith(prefix) for prefix in self.prefixes)

    def create_value(self, text: str, ctx: ValueContext | None = None) -> StringValue:
        return self.factory(text, ctx if ctx is not None else ValueContext())

    def create_empty(self, ctx: ValueContext | None = None) -> StringValue:
        return self.create_value("", ctx)

    def gen_pick_list(self) -> PickList | None:
        return self.pick_list_factory() if self.pick_list_factory is not None else None

    def gen_combo_list(self) -> ComboList | None:
        return ComboList() if self.uses_combo_list else None


# ---------------------------------------------------------------------------
# Factories that need context
# ---------------------------------------------------------------------------


def _status(text: str, ctx: ValueContext) -> StringValue:
    return StatusValue(text, ctx.status_config)


def _rank(text: str, ctx: ValueContext) -> StringValue:
    return RankValue(text, ctx.rank_config)


def _level(text: str, ctx: ValueContext) -> StringValue:
    return LevelValue(text, ctx.level_config)


def _pick(text: str, ctx: ValueContext) -> StringValue:
    return PickListValue(text, ctx.pick_list)


def _short_id(text: str, ctx: ValueContext) -> StringValue:
    return ShortIdValue(text, ctx.pick_list)


def _klass(text: str, ctx: ValueContext) -> StringValue:
    return KlassValue(text, ctx.pick_list)


def _combo(text: str, ctx: ValueContext) -> StringValue:
    return ComboValue(text, ctx.combo_list)


def _default_klass_list() -> PickList:
    pick_list = KlassPickList()
    pick_list.set_defaults()
    return pick_list


def _klass_hint(common: str, hint: str) -> bool:
    return hint == "pickfrom" and common in (lbl.KLASS, "klass")


# ---------------------------------------------------------------------------
# Built-in table
# ---------------------------------------------------------------------------

STRING_TYPE = FieldType("string", _plain(StringValue), hint_aliases=frozenset({"text"}), label_match=False)

BUILTIN_TYPES: list[FieldType] = []


def _register_builtin_types() -> None:
    add = BUILTIN_TYPES.append
    add(FieldType("worklink", _plain(LinkValue), "Work Link"))
    add(FieldType("worktitle", _plain(WorkTitleValue), "Work Title", aliases=frozenset({"work"})))
    add(
        FieldType(
            "worktype",
            _plain(WorkTypeValue),
            "Work Type",
            aliases=frozenset({"workkind"}),
            pick_list_factory=work_type_pick_list,
        )
    )
    add(FieldType("artist", _plain(ArtistValue), "Artist", aliases=frozenset({"artists"})))
    add(
        FieldType(
            "author",
            _plain(AuthorValue),
            "Author",
            aliases=frozenset({"authors", "by", "creator", "creators"}),
        )
    )
    add(FieldType("aka", _plain(AKAValue), "AKA", aliases=frozenset({"alsoknownas", "alias", "aliases"})))
    add(
        FieldType(
            "address", _plain(AddressValue), "Address", aliases=frozenset({"streetaddress"})
        )
    )
    add(
        FieldType(
            "directions",
            _plain(DirectionsValue),
            "Directions",
            aliases=frozenset({"navigation", "drivingdirections"}),
        )
    )
    add(FieldType("backlinks", _plain(BacklinkValue), "Backlinks", user_editable=False))
    add(FieldType("wikilinks", _plain(WikilinkValue), "Wikilinks", user_editable=False))
    add(FieldType("body", _plain(LongTextValue), "Body", is_text_block=True))
    add(
        FieldType(
            "boolean",
            _plain(BooleanValue),
            hint_aliases=frozenset({"bool", "checkbox"}),
            label_match=False,
        )
    )
    add(FieldType("code", _plain(LongTextValue), "Code", is_text_block=True))
    add(
        FieldType(
            "klass",
            _klass,
            "Class",
            aliases=frozenset({"klass"}),
            hint_aliases=frozenset({"class"}),
            hint_matcher=_klass_hint,
            pick_list_factory=_default_klass_list,
        )
    )
    add(FieldType("combo", _combo, label_match=False, uses_combo_list=True))
    add(FieldType("dateadded", _plain(DateTimeValue), "Date Added", user_editable=False))
    add(FieldType("datemodified", _plain(DateTimeValue), "Date Modified", user_editable=False))
    add(FieldType("date", _plain(DateValue), "Date"))
    add(FieldType("duration", _plain(DurationValue), "Duration"))
    add(FieldType("email", _plain(EmailValue), "Email", aliases=frozenset({"emailaddress"})))
    add(FieldType("imagename", _plain(StringValue), "Image Name"))
    add(FieldType("index", _plain(IndexValue), "Index"))
    add(
        FieldType(
            "int",
            _plain(IntValue),
            hint_aliases=frozenset({"integer", "number"}),
            label_match=False,
        )
    )
    add(FieldType("label", _plain(StringValue), label_match=False))
    add(FieldType("level", _level, "Level", aliases=frozenset({"depth"})))
    add(FieldType("lookup", _plain(StringValue), label_match=False))
    add(FieldType("link", _plain(LinkValue), "Link", aliases=frozenset({"url"})))
    add(
        FieldType(
            "longtext",
            _plain(LongTextValue),
            aliases=frozenset({"comment", "comments", "description"}),
            is_text_block=True,
        )
    )
    add(FieldType("teaser", _plain(LongTextValue), "Teaser", is_text_block=True))
    add(FieldType("minutestoread", _plain(MinutesToReadValue), "Minutes to Read", user_editable=False))
    add(FieldType("phone", _plain(PhoneValue), "Phone", aliases=frozenset({"phonenumber"})))
    add(FieldType("pickfrom", _pick, label_match=False, pick_list_factory=PickList))
    add(FieldType("rank", _rank, "Rank"))
    add(FieldType("rating", _plain(RatingValue), "Rating", aliases=frozenset({"priority"})))
    add(FieldType("recurs", _plain(RecursValue), "Recurs", aliases=frozenset({"every"})))
    add(
        FieldType(
            "seq",
            _plain(SeqValue),
            "Seq",
            aliases=frozenset({"sequence", "rev", "revision", "version"}),
            prefixes=(lbl.SEQ,),
        )
    )
    add(FieldType("shortid", _short_id, "Short ID", pick_list_factory=PickList))
    add(FieldType("status", _status, "Status"))
    add(STRING_TYPE)
    add(
        FieldType(
            "tags",
            _plain(TagsValue),
            "Tags",
            aliases=frozenset({"keywords", "category", "categories"}),
        )
    )
    add(FieldType("textformat", _plain(TextFormatValue), "Text Format"))
    add(FieldType("timestamp", _plain(TimestampValue), "Timestamp", user_editable=False))
    add(FieldType("title", _plain(TitleValue), "Title"))


_register_builtin_types()
