class AgentError(Exception):
    """Base error raised while talking to the model."""


class ProviderError(AgentError):
    """The model provider could not be reached or returned no usable output."""


class StrategyError(AgentError):
    """The provider output could not be shaped into the expected format."""
