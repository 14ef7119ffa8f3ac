"""Domain protocols.

Structural interfaces (PEP 544) for the collaborators of the error builder.
Implementations live in the infrastructure and presentation layers and do
not inherit from these protocols.
"""

from error_responder.domain.protocols.adapter_factory_protocol import (
    AdapterFactoryProtocol,
)
from error_responder.domain.protocols.error_message_registry_protocol import (
    ErrorMessageRegistryProtocol,
)
from error_responder.domain.protocols.exception_map_protocol import (
    ExceptionMapProtocol,
)
from error_responder.domain.protocols.formatter_protocol import FormatterProtocol
from error_responder.domain.protocols.logger_protocol import LoggerProtocol
from error_responder.domain.protocols.response_factory_protocol import (
    ResponseFactoryProtocol,
)
from error_responder.domain.protocols.validator_protocol import ValidatorProtocol

__all__ = [
    "AdapterFactoryProtocol",
    "ErrorMessageRegistryProtocol",
    "ExceptionMapProtocol",
    "FormatterProtocol",
    "LoggerProtocol",
    "ResponseFactoryProtocol",
    "ValidatorProtocol",
]
