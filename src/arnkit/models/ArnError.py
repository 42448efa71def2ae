from typing import Optional, Sequence


class ArnError(ValueError):
    """
    Base de todos os erros de parse/validação de ARN.

    Cada erro carrega contexto suficiente para montar um diagnóstico preciso:
    - value: a string que estava sendo analisada
    - position: índice (base 0) dentro de `value`, quando faz sentido
    - char: o caractere ofensivo, quando houver
    - field: campo do ARN (partition, service, region, account_id, resource)
    """

    def __init__(
        self,
        message: str,
        *,
        value: Optional[str] = None,
        position: Optional[int] = None,
        char: Optional[str] = None,
        field: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.value = value
        self.position = position
        self.char = char
        self.field = field

    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "field": self.field,
            "position": self.position,
        }


def _detail(position: Optional[int], char: Optional[str], reason: Optional[str], default: str) -> str:
    if reason:
        return reason
    if char is not None:
        return f"illegal character {char!r} at position {position}"
    return default


class InvalidIdentifierError(ArnError):
    def __init__(
        self,
        value: str,
        position: Optional[int] = None,
        char: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        detail = _detail(position, char, reason, "identifier must not be empty")
        super().__init__(
            f"Invalid identifier {value!r}: {detail}",
            value=value,
            position=position,
            char=char,
            reason=detail,
        )


class InvalidAccountIdError(ArnError):
    def __init__(
        self,
        value: str,
        position: Optional[int] = None,
        char: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        detail = _detail(position, char, reason, "expected exactly 12 digits")
        super().__init__(
            f"Invalid account id {value!r}: {detail}",
            value=value,
            position=position,
            char=char,
            field="account_id",
            reason=detail,
        )


class _InvalidFieldError(ArnError):
    field_name: str = ""

    def __init__(
        self,
        value: str,
        position: Optional[int] = None,
        char: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        detail = _detail(position, char, reason, "invalid value")
        super().__init__(
            f"Invalid {self.field_name} in ARN {value!r}: {detail}",
            value=value,
            position=position,
            char=char,
            field=self.field_name,
            reason=detail,
        )


class InvalidPartitionError(_InvalidFieldError):
    field_name = "partition"


class InvalidServiceError(_InvalidFieldError):
    field_name = "service"


class InvalidRegionError(_InvalidFieldError):
    field_name = "region"


class InvalidResourceError(ArnError):
    def __init__(
        self,
        value: str,
        position: Optional[int] = None,
        char: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        detail = _detail(position, char, reason, "invalid resource")
        super().__init__(
            f"Invalid resource {value!r}: {detail}",
            value=value,
            position=position,
            char=char,
            field="resource",
            reason=detail,
        )


class MissingPrefixError(ArnError):
    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid ARN {value!r}: must start with 'arn:'",
            value=value,
            position=0,
        )


class TooFewFieldsError(ArnError):
    def __init__(self, value: str, separators: int) -> None:
        self.separators = separators
        super().__init__(
            f"Invalid ARN {value!r}: expected 5 ':' separators, found {separators}",
            value=value,
            position=len(value),
        )


class MissingResourceError(ArnError):
    def __init__(self, value: str, position: Optional[int] = None, source: str = "ARN") -> None:
        super().__init__(
            f"Invalid {source} {value!r}: resource must not be empty",
            value=value,
            position=position,
            field="resource",
        )


class UnboundVariableError(ArnError):
    def __init__(self, names: Sequence[str], value: Optional[str] = None) -> None:
        self.names = list(names)
        self.name = self.names[0]
        listed = ", ".join(repr(n) for n in self.names)
        super().__init__(
            f"No value bound for variable(s) {listed}",
            value=value,
            field="resource",
        )


class IncompleteArnError(ArnError):
    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Cannot build ARN, missing: {', '.join(self.missing)}")


class InvalidRecordError(ArnError):
    """Chave desconhecida num registro de ResourceName.from_dict."""

    def __init__(self, key: str, allowed: Sequence[str]) -> None:
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown ARN record field {key!r}: expected one of {', '.join(self.allowed)}",
            value=key,
            field=key,
        )
