"""Builds one identity operation at a time for ``UserEdit``."""

from dataclasses import dataclass, field
from typing import Any

IDENT_KEY_EMAIL = "$email"
IDENT_KEY_SMS = "$sms"
IDENT_KEY_ANDROIDPUSH = "$androidpush"
IDENT_KEY_IOSPUSH = "$iospush"
IDENT_KEY_WHATSAPP = "$whatsapp"
IDENT_KEY_WEBPUSH = "$webpush"
IDENT_KEY_SLACK = "$slack"
IDENT_KEY_MS_TEAMS = "$ms_teams"

PROVIDER_CHANNELS = frozenset({IDENT_KEY_ANDROIDPUSH, IDENT_KEY_IOSPUSH, IDENT_KEY_WEBPUSH})
IDENT_KEYS_ALL = frozenset(
    {
        IDENT_KEY_EMAIL,
        IDENT_KEY_SMS,
        IDENT_KEY_WHATSAPP,
        IDENT_KEY_SLACK,
        IDENT_KEY_MS_TEAMS,
        *PROVIDER_CHANNELS,
    }
)

KEY_ID_PROVIDER = "$id_provider"
KEY_PREFERRED_LANGUAGE = "$preferred_language"
KEY_TIMEZONE = "$timezone"


@dataclass
class OperationResult:
    operation: dict[str, Any]
    errors: list[str] = field(default_factory=list)
    info: list[str] = field(default_factory=list)


class UserEditHelper:
    """Accumulates key/value edits and emits them as a single operation."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._set: dict[str, Any] = {}
        self._set_once: dict[str, Any] = {}
        self._increment: dict[str, Any] = {}
        self._append: dict[str, Any] = {}
        self._remove: dict[str, Any] = {}
        self._unset: list[str] = []
        self._errors: list[str] = []
        self._info: list[str] = []

    def get_operation_result(self) -> OperationResult:
        """Return the pending operation and clear the helper."""
        result = OperationResult(
            operation=self._form_operation(),
            errors=self._errors,
            info=self._info,
        )
        self._reset()
        return result

    def _form_operation(self) -> dict[str, Any]:
        operation: dict[str, Any] = {}
        for key, value in (
            ("$set", self._set),
            ("$set_once", self._set_once),
            ("$add", self._increment),
            ("$append", self._append),
            ("$remove", self._remove),
            ("$unset", self._unset),
        ):
            if value:
                operation[key] = value
        return operation

    def _validate_key(self, key: Any, caller: str) -> str | None:
        if not isinstance(key, str):
            self._info.append(f"[{caller}] skipping key: {key}. key must be a string")
            return None
        key = key.strip()
        if not key:
            self._info.append(f"[{caller}] skipping key: empty string")
            return None
        return key

    def append_kv(self, key: Any, value: Any, kwargs: dict[str, Any], caller: str) -> None:
        k = self._validate_key(key, caller)
        if k is None:
            return
        if k == KEY_ID_PROVIDER and kwargs:
            return
        if k in IDENT_KEYS_ALL:
            self.add_identity(k, value, kwargs.get(KEY_ID_PROVIDER), f"{caller}:{k}")
        else:
            self._append[k] = value

    def remove_kv(self, key: Any, value: Any, kwargs: dict[str, Any], caller: str) -> None:
        k = self._validate_key(key, caller)
        if k is None:
            return
        if k == KEY_ID_PROVIDER and kwargs:
            return
        if k in IDENT_KEYS_ALL:
            self.remove_identity(k, value, kwargs.get(KEY_ID_PROVIDER), f"{caller}:{k}")
        else:
            self._remove[k] = value

    def set_kv(self, key: Any, value: Any, caller: str) -> None:
        k = self._validate_key(key, caller)
        if k is not None:
            self._set[k] = value

    def set_once_kv(self, key: Any, value: Any, caller: str) -> None:
        k = self._validate_key(key, caller)
        if k is not None:
            self._set_once[k] = value

    def increment_kv(self, key: Any, value: Any, caller: str) -> None:
        k = self._validate_key(key, caller)
        if k is None:
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            self._errors.append(f"[{caller}] value for key: {k} must be a number")
            return
        self._increment[k] = value

    def unset_k(self, key: Any, caller: str) -> None:
        k = self._validate_key(key, caller)
        if k is not None:
            self._unset.append(k)

    def set_preferred_language(self, lang_code: str) -> None:
        self._set[KEY_PREFERRED_LANGUAGE] = lang_code

    def set_timezone(self, timezone: str) -> None:
        self._set[KEY_TIMEZONE] = timezone

    def add_identity(self, channel: str, value: Any, provider: str | None, caller: str) -> None:
        if not self._validate_identity_value(value, caller):
            return
        self._append[channel] = value
        if channel in PROVIDER_CHANNELS:
            self._append[KEY_ID_PROVIDER] = provider

    def remove_identity(self, channel: str, value: Any, provider: str | None, caller: str) -> None:
        if not self._validate_identity_value(value, caller):
            return
        self._remove[channel] = value
        if channel in PROVIDER_CHANNELS:
            self._remove[KEY_ID_PROVIDER] = provider

    def _validate_identity_value(self, value: Any, caller: str) -> bool:
        if value is None or (isinstance(value, str) and not value.strip()):
            self._errors.append(f"[{caller}] value must be a non-empty value")
            return False
        return True
