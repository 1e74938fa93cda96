# pyright: reportAny=false, reportExplicitAny=false
"""Async persistence adapter over a key-value store.

Each entity collection is a single JSON array stored under a namespaced
key. Operations are ``async`` so the adapter can later be swapped for a
networked backend, but none of them awaits between reading a collection
and writing it back, so each read-modify-write runs without interleaving
on the event loop.

Corrupt stored collections are not surfaced as errors. Reads report them
through :class:`CollectionRead` with ``status=RECOVERED`` and an empty
collection, and the next write replaces the corrupt payload.
"""

from collections.abc import Callable  # noqa: TC003
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, Final

import orjson
import pendulum
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ipramp.enums import (
    IdeaPhase,
    IdeaSortField,
    IdeaStatus,
    SessionMode,
    SortDirection,
    SprintStatus,
)
from ipramp.exceptions import (
    DataImportError,
    IdeaValidationError,
    SprintValidationError,
)
from ipramp.idea import (
    IDEA_TEXT_FIELDS,
    IDEA_UPDATABLE_FIELDS,
    AliceScore,
    AlignmentScore,
    ClaimDraft,
    FrameworkState,
    Idea,
    IdeaScore,
    InventiveStepAnalysis,
    MarketNeedsAnalysis,
    PatentReport,
    filter_and_sort_ideas,
    idea_from_dict,
    idea_to_dict,
)
from ipramp.settings import InventorInfo, PromptPreferences
from ipramp.sprint import (
    SPRINT_UPDATABLE_FIELDS,
    MemberRole,
    Sprint,
    SprintMemberRecord,
    member_from_dict,
    member_to_dict,
    sprint_from_dict,
    sprint_to_dict,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ._kv import KeyValueStore

__all__ = [
    "EXPORT_VERSION",
    "CollectionRead",
    "ExportBundle",
    "ImportSummary",
    "PersistenceAdapter",
    "ReadStatus",
]

EXPORT_VERSION: Final = "1.0.0"

DEFAULT_KEY_PREFIX: Final = "ipramp"


class ReadStatus(StrEnum):
    """Outcome of reading one collection."""

    ABSENT = "absent"
    LOADED = "loaded"
    RECOVERED = "recovered"


@dataclass(frozen=True)
class CollectionRead[T]:
    """Items read from one collection together with how they were obtained.

    Attributes:
        items: Decoded records, in stored order.
        status: ``absent`` if the key was never written, ``loaded`` on a
            clean read, ``recovered`` if the stored payload was corrupt and
            replaced by an empty collection.
        error: Description of the decode failure for recovered reads.
    """

    items: tuple[T, ...]
    status: ReadStatus
    error: str | None = None

    @property
    def recovered(self) -> bool:
        return self.status is ReadStatus.RECOVERED


class ExportBundle(BaseModel):
    """Full-dataset export document.

    Collections are kept as raw JSON objects; records are decoded by the
    entity codecs so that one layout definition serves both storage and
    export.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore", alias_generator=to_camel, populate_by_name=True
    )

    ideas: list[dict[str, Any]] | None = None
    sprints: list[dict[str, Any]] | None = None
    members: list[dict[str, Any]] | None = None
    prompt_prefs: dict[str, Any] | None = None
    exported_at: str | None = None
    version: str | None = None


class ImportSummary(BaseModel):
    """Counts of records written by an import.

    A ``None`` count means the collection was absent from the payload and
    left untouched.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    ideas: int | None = None
    sprints: int | None = None
    members: int | None = None
    prompt_prefs: bool = False
    version: str | None = None


def _now() -> str:
    return pendulum.now("UTC").to_iso8601_string()


def _parse_enum[E: StrEnum](enum_type: type[E], value: Any) -> E | None:
    try:
        return enum_type(value)
    except ValueError:
        return None


def _choices(enum_type: type[StrEnum]) -> str:
    return ", ".join(member.value for member in enum_type)


def _is_text(value: Any) -> bool:
    return isinstance(value, str)


def _is_optional_text(value: Any) -> bool:
    return value is None or isinstance(value, str)


def _is_text_list(value: Any) -> bool:
    return isinstance(value, tuple) and all(isinstance(v, str) for v in value)


def _is_optional(record_type: type) -> Callable[[Any], bool]:
    return lambda value: value is None or isinstance(value, record_type)


_IDEA_ENUM_FIELDS: Final[dict[str, type[StrEnum]]] = {
    "status": IdeaStatus,
    "phase": IdeaPhase,
}

_IDEA_LIST_FIELDS: Final = ("tech_stack", "tags", "alignment_scores")

# Enum fields are checked separately, before these run.
_IDEA_FIELD_CHECKS: Final[dict[str, tuple[Callable[[Any], bool], str]]] = {
    **dict.fromkeys(IDEA_TEXT_FIELDS, (_is_text, "text")),
    "sprint_id": (_is_optional_text, "text or null"),
    "team_id": (_is_optional_text, "text or null"),
    "tech_stack": (_is_text_list, "a list of text"),
    "tags": (_is_text_list, "a list of text"),
    "score": (_is_optional(IdeaScore), "an IdeaScore or null"),
    "alice_score": (_is_optional(AliceScore), "an AliceScore or null"),
    "framework": (lambda v: isinstance(v, FrameworkState), "a FrameworkState"),
    "claim_draft": (_is_optional(ClaimDraft), "a ClaimDraft or null"),
    "inventive_step_analysis": (
        _is_optional(InventiveStepAnalysis),
        "an InventiveStepAnalysis or null",
    ),
    "market_needs_analysis": (
        _is_optional(MarketNeedsAnalysis),
        "a MarketNeedsAnalysis or null",
    ),
    "patent_report": (_is_optional(PatentReport), "a PatentReport or null"),
    "alignment_scores": (
        lambda v: isinstance(v, tuple)
        and all(isinstance(s, AlignmentScore) for s in v),
        "a list of AlignmentScore",
    ),
}


def _coerce_idea_updates(idea_id: str, updates: dict[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(updates) - IDEA_UPDATABLE_FIELDS)
    if unknown:
        msg = f"Unknown idea field(s): {', '.join(unknown)}"
        raise IdeaValidationError(msg, idea_id=idea_id, field=unknown[0])

    coerced = dict(updates)
    for name, enum_type in _IDEA_ENUM_FIELDS.items():
        if name not in coerced:
            continue
        parsed = _parse_enum(enum_type, coerced[name])
        if parsed is None:
            expected = _choices(enum_type)
            msg = f"Invalid {name} '{coerced[name]}'. Expected one of: {expected}"
            raise IdeaValidationError(
                msg,
                idea_id=idea_id,
                field=name,
                value=coerced[name],
                expected=expected,
            )
        coerced[name] = parsed
    for name in _IDEA_LIST_FIELDS:
        if isinstance(coerced.get(name), list):
            coerced[name] = tuple(coerced[name])

    for name, value in coerced.items():
        check = _IDEA_FIELD_CHECKS.get(name)
        if check is not None and not check[0](value):
            msg = f"Idea field {name} must be {check[1]}"
            raise IdeaValidationError(
                msg, idea_id=idea_id, field=name, value=value, expected=check[1]
            )
    return coerced


_SPRINT_ENUM_FIELDS: Final[dict[str, type[StrEnum]]] = {
    "status": SprintStatus,
    "session_mode": SessionMode,
    "phase": IdeaPhase,
}


def _coerce_sprint_updates(updates: dict[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(updates) - SPRINT_UPDATABLE_FIELDS)
    if unknown:
        msg = f"Unknown sprint field(s): {', '.join(unknown)}"
        raise SprintValidationError(msg, field=unknown[0])

    coerced = dict(updates)
    for name, enum_type in _SPRINT_ENUM_FIELDS.items():
        if name not in coerced:
            continue
        parsed = _parse_enum(enum_type, coerced[name])
        if parsed is None:
            expected = _choices(enum_type)
            msg = f"Invalid {name} '{coerced[name]}'. Expected one of: {expected}"
            raise SprintValidationError(
                msg, field=name, value=coerced[name], expected=expected
            )
        coerced[name] = parsed
    return coerced


class PersistenceAdapter:
    """CRUD access to ideas, sprints, members and user settings.

    Not-found outcomes are reported as ``None`` or ``False``; they never
    raise. Invalid field names or values in an update raise the matching
    validation error.
    """

    __slots__: Final = ("_key_prefix", "_logger", "_store")

    _store: "KeyValueStore"  # noqa: UP037
    _key_prefix: str
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        store: "KeyValueStore",  # noqa: UP037
        *,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the adapter.

        Args:
            store: Underlying key-value store.
            key_prefix: Namespace prepended to every collection key.
            logger: Optional logger; operations log at debug level and
                recovered collections at warning level.
        """
        self._store = store
        self._key_prefix = key_prefix
        self._logger = logger

    @property
    def store(self) -> "KeyValueStore":  # noqa: UP037
        return self._store

    # -------------------------------------------------------------------------
    # Keys and raw collection access
    # -------------------------------------------------------------------------

    def key(self, collection: str) -> str:
        """Return the namespaced store key for a collection name."""
        return f"{self._key_prefix}:{collection}"

    @property
    def ideas_key(self) -> str:
        return self.key("ideas")

    @property
    def sprints_key(self) -> str:
        return self.key("sprints")

    @property
    def members_key(self) -> str:
        return self.key("sprint-members")

    @property
    def prompt_prefs_key(self) -> str:
        return self.key("prompt-prefs")

    @property
    def inventor_info_key(self) -> str:
        return self.key("inventor-info")

    def _read_collection[T](
        self, key: str, decode: Callable[[dict[str, Any]], T]
    ) -> CollectionRead[T]:
        raw = self._store.get(key)
        if raw is None:
            return CollectionRead(items=(), status=ReadStatus.ABSENT)

        try:
            data = orjson.loads(raw)
            if not isinstance(data, list):
                msg = f"expected a JSON array, got {type(data).__name__}"
                raise TypeError(msg)  # noqa: TRY301
            items = tuple(decode(item) for item in data)
        except (
            orjson.JSONDecodeError,
            AttributeError,
            KeyError,
            TypeError,
            ValueError,
        ) as e:
            if self._logger:
                self._logger.warning("collection_recovered", key=key, error=str(e))
            return CollectionRead(items=(), status=ReadStatus.RECOVERED, error=str(e))

        return CollectionRead(items=items, status=ReadStatus.LOADED)

    def _write_collection(self, key: str, records: list[dict[str, Any]]) -> None:
        self._store.set(key, orjson.dumps(records).decode())
        if self._logger:
            self._logger.debug("collection_written", key=key, count=len(records))

    def _read_object(self, key: str) -> Any:
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            if self._logger:
                self._logger.warning("object_recovered", key=key, error=str(e))
            return None

    def _decode_idea(self, data: Any) -> Idea:
        if not isinstance(data, dict):
            msg = "idea record must be a JSON object"
            raise TypeError(msg)
        return idea_from_dict(data, logger=self._logger)

    def _write_ideas(self, ideas: list[Idea] | tuple[Idea, ...]) -> None:
        self._write_collection(self.ideas_key, [idea_to_dict(i) for i in ideas])

    def _write_sprints(self, sprints: list[Sprint] | tuple[Sprint, ...]) -> None:
        self._write_collection(self.sprints_key, [sprint_to_dict(s) for s in sprints])

    def _write_members(
        self, members: list[SprintMemberRecord] | tuple[SprintMemberRecord, ...]
    ) -> None:
        self._write_collection(self.members_key, [member_to_dict(m) for m in members])

    # -------------------------------------------------------------------------
    # Ideas
    # -------------------------------------------------------------------------

    async def read_ideas(self) -> CollectionRead[Idea]:
        """Read the whole idea collection with its read status."""
        return self._read_collection(self.ideas_key, self._decode_idea)

    async def list_ideas(self, user_id: str) -> list[Idea]:
        """List a user's ideas in stored order (newest first)."""
        result = await self.read_ideas()
        return [idea for idea in result.items if idea.user_id == user_id]

    async def get_idea(self, idea_id: str) -> Idea | None:
        result = await self.read_ideas()
        return next((idea for idea in result.items if idea.id == idea_id), None)

    async def create_idea(self, idea: Idea) -> Idea:
        """Store a new idea at the front of the collection.

        An existing idea with the same id is replaced.
        """
        existing = self._read_collection(self.ideas_key, self._decode_idea).items
        self._write_ideas([idea, *(i for i in existing if i.id != idea.id)])
        if self._logger:
            self._logger.debug("idea_created", idea_id=idea.id, user_id=idea.user_id)
        return idea

    async def update_idea(self, idea_id: str, **updates: Any) -> Idea | None:
        """Merge field updates into an idea and stamp ``updated_at``.

        Args:
            idea_id: Idea to update.
            **updates: Updatable fields and their new values. Enum fields
                accept their string values.

        Returns:
            The updated idea, or None if no idea has ``idea_id``.

        Raises:
            IdeaValidationError: If a field is unknown or managed, a value has
                the wrong type or an unknown enum value, or it violates a
                model invariant.
        """
        coerced = _coerce_idea_updates(idea_id, updates)
        ideas = list(self._read_collection(self.ideas_key, self._decode_idea).items)
        for index, idea in enumerate(ideas):
            if idea.id == idea_id:
                updated = replace(idea, **coerced, updated_at=_now())
                ideas[index] = updated
                self._write_ideas(ideas)
                if self._logger:
                    self._logger.debug(
                        "idea_updated", idea_id=idea_id, fields=sorted(coerced)
                    )
                return updated

        if self._logger:
            self._logger.debug("idea_update_missing", idea_id=idea_id)
        return None

    async def delete_idea(self, idea_id: str) -> bool:
        ideas = self._read_collection(self.ideas_key, self._decode_idea).items
        remaining = [idea for idea in ideas if idea.id != idea_id]
        if len(remaining) == len(ideas):
            return False
        self._write_ideas(remaining)
        if self._logger:
            self._logger.debug("idea_deleted", idea_id=idea_id)
        return True

    async def filter_ideas(
        self,
        user_id: str,
        *,
        status: IdeaStatus | str | None = None,
        search: str = "",
        sort_by: IdeaSortField | str = IdeaSortField.UPDATED_AT,
        sort_dir: SortDirection | str = SortDirection.DESC,
    ) -> list[Idea]:
        """List a user's ideas filtered by status and a search string.

        The search matches case-insensitively against title, problem
        statement and tags. Sorting is stable.
        """
        return filter_and_sort_ideas(
            await self.list_ideas(user_id),
            status=status,
            search=search,
            sort_by=sort_by,
            sort_dir=sort_dir,
        )

    async def list_personal_ideas(self, user_id: str) -> list[Idea]:
        """List a user's ideas that belong to no sprint."""
        return [i for i in await self.list_ideas(user_id) if i.sprint_id is None]

    async def list_sprint_ideas(self, sprint_id: str) -> list[Idea]:
        result = await self.read_ideas()
        return [idea for idea in result.items if idea.sprint_id == sprint_id]

    async def list_candidate_ideas(self, user_id: str) -> list[Idea]:
        """List ideas a user could link into a sprint."""
        return await self.list_personal_ideas(user_id)

    async def link_to_sprint(self, idea_id: str, sprint_id: str) -> Idea | None:
        return await self.update_idea(idea_id, sprint_id=sprint_id)

    async def unlink_from_sprint(self, idea_id: str) -> Idea | None:
        return await self.update_idea(idea_id, sprint_id=None)

    # -------------------------------------------------------------------------
    # Sprints
    # -------------------------------------------------------------------------

    async def read_sprints(self) -> CollectionRead[Sprint]:
        return self._read_collection(self.sprints_key, sprint_from_dict)

    async def list_sprints(self) -> list[Sprint]:
        """List every sprint. Sprints are not scoped to a user."""
        return list((await self.read_sprints()).items)

    async def get_sprint(self, sprint_id: str) -> Sprint | None:
        result = await self.read_sprints()
        return next((s for s in result.items if s.id == sprint_id), None)

    async def create_sprint(self, sprint: Sprint) -> Sprint:
        existing = self._read_collection(self.sprints_key, sprint_from_dict).items
        self._write_sprints([sprint, *(s for s in existing if s.id != sprint.id)])
        if self._logger:
            self._logger.debug("sprint_created", sprint_id=sprint.id)
        return sprint

    async def update_sprint(self, sprint_id: str, **updates: Any) -> Sprint | None:
        """Merge field updates into a sprint and stamp ``updated_at``.

        Returns:
            The updated sprint, or None if no sprint has ``sprint_id``.

        Raises:
            SprintValidationError: If a field is unknown, an enum value is
                unknown, or the timer would become negative.
        """
        coerced = _coerce_sprint_updates(updates)
        sprints = list(self._read_collection(self.sprints_key, sprint_from_dict).items)
        for index, sprint in enumerate(sprints):
            if sprint.id == sprint_id:
                updated = replace(sprint, **coerced, updated_at=_now())
                sprints[index] = updated
                self._write_sprints(sprints)
                if self._logger:
                    self._logger.debug(
                        "sprint_updated", sprint_id=sprint_id, fields=sorted(coerced)
                    )
                return updated
        return None

    async def delete_sprint(self, sprint_id: str) -> bool:
        """Delete a sprint, unlink its ideas and drop its members.

        Returns:
            True if the sprint existed.
        """
        sprints = self._read_collection(self.sprints_key, sprint_from_dict).items
        remaining = [s for s in sprints if s.id != sprint_id]
        if len(remaining) == len(sprints):
            return False
        self._write_sprints(remaining)

        now = _now()
        ideas = self._read_collection(self.ideas_key, self._decode_idea).items
        unlinked = 0
        relinked: list[Idea] = []
        for idea in ideas:
            if idea.sprint_id == sprint_id:
                relinked.append(replace(idea, sprint_id=None, updated_at=now))
                unlinked += 1
            else:
                relinked.append(idea)
        if unlinked:
            self._write_ideas(relinked)

        members = self._read_collection(self.members_key, member_from_dict).items
        kept = [m for m in members if m.sprint_id != sprint_id]
        if len(kept) != len(members):
            self._write_members(kept)

        if self._logger:
            self._logger.debug(
                "sprint_deleted",
                sprint_id=sprint_id,
                ideas_unlinked=unlinked,
                members_removed=len(members) - len(kept),
            )
        return True

    # -------------------------------------------------------------------------
    # Sprint members
    # -------------------------------------------------------------------------

    async def read_members(self) -> CollectionRead[SprintMemberRecord]:
        return self._read_collection(self.members_key, member_from_dict)

    async def list_members(self, sprint_id: str) -> list[SprintMemberRecord]:
        result = await self.read_members()
        return [m for m in result.items if m.sprint_id == sprint_id]

    async def add_member(
        self, sprint_id: str, user_id: str, role: MemberRole | str | None = None
    ) -> SprintMemberRecord:
        """Add a user to a sprint.

        Adding a user who is already a member returns the existing record
        unchanged.
        """
        members = self._read_collection(self.members_key, member_from_dict).items
        for member in members:
            if member.sprint_id == sprint_id and member.user_id == user_id:
                return member

        record = SprintMemberRecord(
            sprint_id=sprint_id,
            user_id=user_id,
            role=MemberRole(role or MemberRole.MEMBER).value,
        )
        self._write_members([*members, record])
        if self._logger:
            self._logger.debug(
                "member_added", sprint_id=sprint_id, user_id=user_id, role=record.role
            )
        return record

    async def remove_member(self, sprint_id: str, user_id: str) -> bool:
        members = self._read_collection(self.members_key, member_from_dict).items
        kept = [
            m
            for m in members
            if not (m.sprint_id == sprint_id and m.user_id == user_id)
        ]
        if len(kept) == len(members):
            return False
        self._write_members(kept)
        return True

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    async def load_prompt_preferences(self) -> PromptPreferences:
        """Load preferences merged over the defaults.

        Missing, corrupt or partially invalid stored data falls back to the
        default for each affected field.
        """
        return PromptPreferences.from_stored(self._read_object(self.prompt_prefs_key))

    async def save_prompt_preferences(self, prefs: PromptPreferences) -> None:
        self._store.set(self.prompt_prefs_key, orjson.dumps(prefs.to_stored()).decode())

    async def reset_prompt_preferences(self) -> PromptPreferences:
        _ = self._store.delete(self.prompt_prefs_key)
        return PromptPreferences()

    async def load_inventor_info(self) -> InventorInfo:
        data = self._read_object(self.inventor_info_key)
        if not isinstance(data, dict):
            return InventorInfo()
        try:
            return InventorInfo.model_validate(data)
        except ValidationError:
            return InventorInfo()

    async def save_inventor_info(self, info: InventorInfo) -> None:
        self._store.set(self.inventor_info_key, info.model_dump_json())

    # -------------------------------------------------------------------------
    # Export / import
    # -------------------------------------------------------------------------

    async def export_all_data(self) -> str:
        """Serialize every collection into one JSON document.

        Returns:
            Indented JSON text with ``ideas``, ``sprints``, ``members``,
            ``promptPrefs`` (null when never saved), ``exportedAt`` and
            ``version``.
        """
        ideas = self._read_collection(self.ideas_key, self._decode_idea).items
        sprints = self._read_collection(self.sprints_key, sprint_from_dict).items
        members = self._read_collection(self.members_key, member_from_dict).items
        prefs_raw = self._read_object(self.prompt_prefs_key)

        document = {
            "ideas": [idea_to_dict(i) for i in ideas],
            "sprints": [sprint_to_dict(s) for s in sprints],
            "members": [member_to_dict(m) for m in members],
            "promptPrefs": (
                PromptPreferences.from_stored(prefs_raw).to_stored()
                if prefs_raw is not None
                else None
            ),
            "exportedAt": _now(),
            "version": EXPORT_VERSION,
        }
        if self._logger:
            self._logger.debug(
                "data_exported",
                ideas=len(ideas),
                sprints=len(sprints),
                members=len(members),
            )
        return orjson.dumps(document, option=orjson.OPT_INDENT_2).decode()

    async def import_all_data(self, text: str | bytes) -> ImportSummary:
        """Replace stored collections with those in an export document.

        Every record is validated before anything is written, so a failed
        import leaves storage untouched. Collections missing from the
        document, or set to null, are left as they are.

        Args:
            text: JSON produced by :meth:`export_all_data`.

        Returns:
            Counts of imported records.

        Raises:
            DataImportError: If the text is not JSON (``invalid_json``), not
                a JSON object (``not_an_object``), or holds a record that
                cannot be decoded (``invalid_record``).
        """
        try:
            data = orjson.loads(text)
        except orjson.JSONDecodeError as e:
            msg = f"Import file is not valid JSON: {e}"
            raise DataImportError(msg, reason="invalid_json") from e

        if not isinstance(data, dict):
            msg = "Import file must contain a JSON object"
            raise DataImportError(msg, reason="not_an_object")

        try:
            bundle = ExportBundle.model_validate(data)
            ideas = (
                [idea_from_dict(r, logger=self._logger) for r in bundle.ideas]
                if bundle.ideas is not None
                else None
            )
            sprints = (
                [sprint_from_dict(r) for r in bundle.sprints]
                if bundle.sprints is not None
                else None
            )
            members = (
                [member_from_dict(r) for r in bundle.members]
                if bundle.members is not None
                else None
            )
        except (ValidationError, ValueError, TypeError) as e:
            msg = f"Import file holds an invalid record: {e}"
            raise DataImportError(msg, reason="invalid_record") from e

        if ideas is not None:
            self._write_ideas(ideas)
        if sprints is not None:
            self._write_sprints(sprints)
        if members is not None:
            self._write_members(members)
        if bundle.prompt_prefs is not None:
            prefs = PromptPreferences.from_stored(bundle.prompt_prefs)
            await self.save_prompt_preferences(prefs)

        summary = ImportSummary(
            ideas=None if ideas is None else len(ideas),
            sprints=None if sprints is None else len(sprints),
            members=None if members is None else len(members),
            prompt_prefs=bundle.prompt_prefs is not None,
            version=bundle.version,
        )
        if self._logger:
            self._logger.info("data_imported", **summary.model_dump())
        return summary

    async def clear_all_data(self) -> int:
        """Delete every key under this adapter's prefix.

        Returns:
            Number of keys removed.
        """
        prefix = f"{self._key_prefix}:"
        keys = [k for k in self._store.keys() if k.startswith(prefix)]
        removed = sum(1 for k in keys if self._store.delete(k))
        if self._logger:
            self._logger.info("data_cleared", keys_removed=removed)
        return removed
