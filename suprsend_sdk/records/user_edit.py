import copy
from collections.abc import Callable
from typing import Any

from suprsend_sdk.config.limits import (
    IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.records.base import BaseRecord, epoch_milliseconds, new_insert_id
from suprsend_sdk.records.exceptions import InputValueError
from suprsend_sdk.records.sizing import get_apparent_identity_event_size
from suprsend_sdk.records.user_edit_helper import (
    IDENT_KEY_ANDROIDPUSH,
    IDENT_KEY_EMAIL,
    IDENT_KEY_IOSPUSH,
    IDENT_KEY_MS_TEAMS,
    IDENT_KEY_SLACK,
    IDENT_KEY_SMS,
    IDENT_KEY_WEBPUSH,
    IDENT_KEY_WHATSAPP,
    UserEditHelper,
)


class UserEdit(BaseRecord):
    """Collects property and channel edits for one user (subscriber).

    Each public call forms one operation. Invalid keys are skipped and
    reported through ``warnings()`` rather than raised.
    """

    def __init__(self, distinct_id: str) -> None:
        self.distinct_id = distinct_id.strip() if isinstance(distinct_id, str) else distinct_id
        self.operations: list[dict[str, Any]] = []
        self._errors: list[str] = []
        self._info: list[str] = []
        self._helper = UserEditHelper()

    @property
    def errors(self) -> list[str]:
        return self._errors

    @property
    def info(self) -> list[str]:
        return self._info

    # ------------------------ payload

    def get_final_json(
        self,
        settings: Settings,
        is_part_of_bulk: bool = False,
    ) -> tuple[dict[str, Any], int]:
        if not isinstance(self.distinct_id, str) or not self.distinct_id:
            raise InputValueError("missing distinct_id")
        payload = {
            "$schema": "2",
            "$insert_id": new_insert_id(),
            "$time": epoch_milliseconds(),
            "env": settings.workspace_key,
            "distinct_id": self.distinct_id,
            "$user_operations": copy.deepcopy(self.operations),
            "properties": {"$ss_sdk_version": settings.user_agent},
        }
        apparent_size = get_apparent_identity_event_size(payload)
        if apparent_size > IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES:
            raise InputValueError(
                f"User Payload size too big - {apparent_size} Bytes, "
                f"must not cross {IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE}"
            )
        return payload, apparent_size

    def as_json(self) -> dict[str, Any]:
        return {
            "distinct_id": self.distinct_id,
            "$user_operations": self.operations,
            "warnings": self.warnings(),
        }

    def warnings(self) -> list[str]:
        messages: list[str] = []
        if self._info:
            messages.append(f"[distinct_id: {self.distinct_id}]" + "\n".join(self._info))
        if self._errors:
            messages.append(f"[distinct_id: {self.distinct_id}]" + "\n".join(self._errors))
        return messages

    def _collect_operation(self) -> None:
        result = self._helper.get_operation_result()
        self._errors.extend(result.errors)
        self._info.extend(result.info)
        if result.operation:
            self.operations.append(result.operation)

    # ------------------------ generic properties

    def _apply(
        self,
        caller: str,
        arg1: Any,
        arg2: Any,
        apply_kv: Callable[[Any, Any, dict[str, Any]], None],
    ) -> None:
        if isinstance(arg1, str):
            if arg2 is None:
                self._errors.append(f"[{caller}] if arg1 is a string, then arg2 must be passed")
                return
            apply_kv(arg1, arg2, {})
        elif isinstance(arg1, dict):
            for key, value in arg1.items():
                apply_kv(key, value, arg1)
        else:
            self._errors.append(f"[{caller}] arg1 must be either string or a dict")
            return
        self._collect_operation()

    def set(self, arg1: str | dict[str, Any], arg2: Any = None) -> None:
        self._apply("set", arg1, arg2, lambda k, v, _: self._helper.set_kv(k, v, "set"))

    def set_once(self, arg1: str | dict[str, Any], arg2: Any = None) -> None:
        self._apply(
            "set_once", arg1, arg2, lambda k, v, _: self._helper.set_once_kv(k, v, "set_once")
        )

    def increment(self, arg1: str | dict[str, Any], arg2: Any = None) -> None:
        self._apply(
            "increment", arg1, arg2, lambda k, v, _: self._helper.increment_kv(k, v, "increment")
        )

    def append(self, arg1: str | dict[str, Any], arg2: Any = None) -> None:
        self._apply(
            "append", arg1, arg2, lambda k, v, kw: self._helper.append_kv(k, v, kw, "append")
        )

    def remove(self, arg1: str | dict[str, Any], arg2: Any = None) -> None:
        self._apply(
            "remove", arg1, arg2, lambda k, v, kw: self._helper.remove_kv(k, v, kw, "remove")
        )

    def unset(self, key: str | list[str]) -> None:
        if isinstance(key, str):
            keys = [key]
        elif isinstance(key, list):
            keys = key
        else:
            self._errors.append("[unset] key must be either String or List[string]")
            return
        for k in keys:
            self._helper.unset_k(k, "unset")
        self._collect_operation()

    def set_preferred_language(self, lang_code: str) -> None:
        self._helper.set_preferred_language(lang_code)
        self._collect_operation()

    def set_timezone(self, timezone: str) -> None:
        self._helper.set_timezone(timezone)
        self._collect_operation()

    # ------------------------ channels

    def _add_channel(self, channel: str, value: Any, provider: str | None = None) -> None:
        caller = f"add_{channel.lstrip('$')}"
        self._helper.add_identity(channel, value, provider, caller)
        self._collect_operation()

    def _remove_channel(self, channel: str, value: Any, provider: str | None = None) -> None:
        caller = f"remove_{channel.lstrip('$')}"
        self._helper.remove_identity(channel, value, provider, caller)
        self._collect_operation()

    def add_email(self, value: str) -> None:
        self._add_channel(IDENT_KEY_EMAIL, value)

    def remove_email(self, value: str) -> None:
        self._remove_channel(IDENT_KEY_EMAIL, value)

    def add_sms(self, value: str) -> None:
        self._add_channel(IDENT_KEY_SMS, value)

    def remove_sms(self, value: str) -> None:
        self._remove_channel(IDENT_KEY_SMS, value)

    def add_whatsapp(self, value: str) -> None:
        self._add_channel(IDENT_KEY_WHATSAPP, value)

    def remove_whatsapp(self, value: str) -> None:
        self._remove_channel(IDENT_KEY_WHATSAPP, value)

    def add_androidpush(self, value: str, provider: str | None = None) -> None:
        self._add_channel(IDENT_KEY_ANDROIDPUSH, value, provider)

    def remove_androidpush(self, value: str, provider: str | None = None) -> None:
        self._remove_channel(IDENT_KEY_ANDROIDPUSH, value, provider)

    def add_iospush(self, value: str, provider: str | None = None) -> None:
        self._add_channel(IDENT_KEY_IOSPUSH, value, provider)

    def remove_iospush(self, value: str, provider: str | None = None) -> None:
        self._remove_channel(IDENT_KEY_IOSPUSH, value, provider)

    def add_webpush(self, value: dict[str, Any], provider: str | None = None) -> None:
        self._add_channel(IDENT_KEY_WEBPUSH, value, provider)

    def remove_webpush(self, value: dict[str, Any], provider: str | None = None) -> None:
        self._remove_channel(IDENT_KEY_WEBPUSH, value, provider)

    def add_slack(self, value: dict[str, Any]) -> None:
        self._add_channel(IDENT_KEY_SLACK, value)

    def remove_slack(self, value: dict[str, Any]) -> None:
        self._remove_channel(IDENT_KEY_SLACK, value)

    def add_ms_teams(self, value: dict[str, Any]) -> None:
        self._add_channel(IDENT_KEY_MS_TEAMS, value)

    def remove_ms_teams(self, value: dict[str, Any]) -> None:
        self._remove_channel(IDENT_KEY_MS_TEAMS, value)
