from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from ..models import (
    AccountIdentifier,
    Identifier,
    InvalidAccountIdError,
    InvalidIdentifierError,
    InvalidPartitionError,
    InvalidRegionError,
    InvalidResourceError,
    InvalidServiceError,
    MissingPrefixError,
    MissingResourceError,
    ResourceIdentifier,
    TooFewFieldsError,
)

ARN_PREFIX = "arn"
FIELD_SEPARATOR = ":"
FIELD_COUNT = 6


class State(Enum):
    PREFIX = "prefix"
    PARTITION = "partition"
    SERVICE = "service"
    REGION = "region"
    ACCOUNT = "account_id"
    RESOURCE = "resource"


class ArnFields(NamedTuple):
    partition: Optional[Identifier]
    service: Identifier
    region: Optional[Identifier]
    account_id: Optional[AccountIdentifier]
    resource: ResourceIdentifier


def _split_fields(arn: str) -> List[Tuple[int, str]]:
    """
    Divide o ARN nos 6 campos, guardando o offset de cada um.

    Só os 5 primeiros ':' são separadores de campo; tudo que vem depois
    pertence ao resource e é interpretado pelo ResourceIdentifier.
    """
    fields: List[Tuple[int, str]] = []
    start = 0
    for _ in range(FIELD_COUNT - 1):
        idx = arn.find(FIELD_SEPARATOR, start)
        if idx == -1:
            break
        fields.append((start, arn[start:idx]))
        start = idx + 1
    fields.append((start, arn[start:]))
    return fields


def _identifier_field(error_cls, arn: str, offset: int, text: str) -> Identifier:
    try:
        return Identifier.parse(text)
    except InvalidIdentifierError as e:
        if e.char is None:
            raise error_cls(arn, offset, reason=f"{error_cls.field_name} must not be empty") from e
        raise error_cls(arn, offset + e.position, e.char) from e


def _expect_prefix(arn: str, offset: int, text: str) -> None:
    if text != ARN_PREFIX:
        raise MissingPrefixError(arn)


def _parse_partition(arn: str, offset: int, text: str) -> Optional[Identifier]:
    if not text:
        return None
    return _identifier_field(InvalidPartitionError, arn, offset, text)


def _parse_service(arn: str, offset: int, text: str) -> Identifier:
    # service é obrigatório: vazio é erro, não default
    return _identifier_field(InvalidServiceError, arn, offset, text)


def _parse_region(arn: str, offset: int, text: str) -> Optional[Identifier]:
    if not text:
        return None
    return _identifier_field(InvalidRegionError, arn, offset, text)


def _parse_account(arn: str, offset: int, text: str) -> Optional[AccountIdentifier]:
    if not text:
        return None
    try:
        return AccountIdentifier.parse(text)
    except InvalidAccountIdError as e:
        position = offset + e.position if e.position is not None else offset
        raise InvalidAccountIdError(arn, position, e.char, reason=None if e.char else e.reason) from e


def _parse_resource(arn: str, offset: int, text: str) -> ResourceIdentifier:
    if not text:
        raise MissingResourceError(arn, offset)
    try:
        return ResourceIdentifier.parse(text)
    except InvalidResourceError as e:
        position = offset + e.position if e.position is not None else offset
        raise InvalidResourceError(arn, position, e.char, reason=None if e.char else e.reason) from e


_HANDLERS: Dict[State, Callable] = {
    State.PREFIX: _expect_prefix,
    State.PARTITION: _parse_partition,
    State.SERVICE: _parse_service,
    State.REGION: _parse_region,
    State.ACCOUNT: _parse_account,
    State.RESOURCE: _parse_resource,
}


def parse_fields(arn: str) -> ArnFields:
    """
    Converte uma string `arn:partition:service:region:account:resource` nos
    campos tipados.

    Uma passada da esquerda para a direita, sem backtracking; o primeiro erro
    encontrado é levantado (fail-fast). Posições de erro são relativas a `arn`.
    """
    if not isinstance(arn, str):
        raise TypeError(f"ARN must be str, got {type(arn).__name__}")

    fields = _split_fields(arn)
    if len(fields) < FIELD_COUNT:
        raise TooFewFieldsError(arn, separators=len(fields) - 1)

    values: Dict[State, object] = {}
    for state, (offset, text) in zip(State, fields):
        values[state] = _HANDLERS[state](arn, offset, text)

    return ArnFields(
        partition=values[State.PARTITION],
        service=values[State.SERVICE],
        region=values[State.REGION],
        account_id=values[State.ACCOUNT],
        resource=values[State.RESOURCE],
    )
