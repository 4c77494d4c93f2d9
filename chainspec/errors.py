class ChainSpecError(Exception):
    """Base class for genesis construction failures."""


class MissingRuntimePayload(ChainSpecError):
    """Raised when the runtime payload handed to genesis assembly is empty."""


class RuntimePayloadUnavailable(ChainSpecError):
    """Raised by presets when the deployment was built without a runtime payload."""


class MalformedAddress(ChainSpecError):
    """Raised when an EVM address does not decode to exactly 20 bytes."""


class InvalidLabel(ChainSpecError):
    """Raised when a label does not form a valid derivation phrase."""
