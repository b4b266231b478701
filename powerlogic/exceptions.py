class PowerLogicError(Exception): ...


class SchemaError(PowerLogicError): ...


class EmptyDatasetError(PowerLogicError): ...


class RowSourceError(PowerLogicError): ...


class EventError(PowerLogicError): ...


def require(
    condition: bool, message: str, exc: type[PowerLogicError] = PowerLogicError
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
