"""Validator adapter for plain field-to-messages mappings.

Lets application code attach hand-built failures:

    builder.error("invalid_input").validator({"email": "Already taken"})
"""

from collections.abc import Mapping

DEFAULT_RULE = "invalid"


class MappingValidatorAdapter:
    """ValidatorProtocol adapter over ``{field: message | [messages]}``."""

    def __init__(self, failures: Mapping[str, str | list[str]]) -> None:
        self._messages: dict[str, list[str]] = {
            str(field): [messages] if isinstance(messages, str) else list(messages)
            for field, messages in failures.items()
        }

    def failed(self) -> list[str]:
        return list(self._messages)

    def errors(self) -> dict[str, list[str]]:
        return {
            field: [DEFAULT_RULE] * len(messages)
            for field, messages in self._messages.items()
        }

    def messages(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._messages.items()}
