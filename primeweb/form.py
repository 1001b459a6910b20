"""Validation of submitted form data."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Union

FormInput = Mapping[str, Union[str, Sequence[str]]]


class FieldErrors(Dict[str, List[str]]):
    """Error messages collected per form field."""

    def __missing__(self, field: str) -> List[str]:
        return []

    def get(self, field: str) -> str:  # type: ignore[override]
        """Return the first message for ``field``, or an empty string."""
        messages = self[field]
        return messages[0] if messages else ""

    def add(self, field: str, message: str) -> None:
        """Record a message for ``field``."""
        self.setdefault(field, []).append(message)


def _values(data: FormInput, key: str) -> List[str]:
    if hasattr(data, "getlist"):
        return [str(v) for v in data.getlist(key)]
    value = data[key]
    return [value] if isinstance(value, str) else [str(v) for v in value]


class Form:
    """Submitted values together with the validation errors found in them."""

    def __init__(self, data: Optional[FormInput] = None) -> None:
        self.data: Dict[str, List[str]] = {k: _values(data, k) for k in data or {}}
        self.errors = FieldErrors()

    def _value(self, field: str) -> str:
        values = self.data.get(field)
        return values[0] if values else ""

    def has(self, field: str) -> bool:
        """Whether ``field`` was submitted with a non-empty value."""
        return self._value(field) != ""

    def required(self, *fields: str) -> None:
        """Flag every field that is missing or blank."""
        for name in fields:
            if not self._value(name).strip():
                self.errors.add(name, "This field cannot be blank")

    def check(self, ok: bool, key: str, message: str) -> None:
        """Record ``message`` against ``key`` unless ``ok`` holds."""
        if not ok:
            self.errors.add(key, message)

    def valid(self) -> bool:
        """Whether no errors have been recorded."""
        return not self.errors