from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Union

from .engine.parse_engine import ARN_PREFIX, FIELD_SEPARATOR, parse_fields
from .models import (
    AccountIdentifier,
    IncompleteArnError,
    Identifier,
    InvalidIdentifierError,
    InvalidPartitionError,
    InvalidRecordError,
    InvalidRegionError,
    InvalidResourceError,
    InvalidServiceError,
    MissingResourceError,
    ResourceIdentifier,
)

DEFAULT_PARTITION = "aws"

RECORD_FIELDS = ("partition", "service", "region", "account_id", "resource")


def _check_type(name: str, value: Any, expected: type, optional: bool) -> None:
    if value is None and optional:
        return
    if not isinstance(value, expected):
        raise TypeError(f"ResourceName.{name} must be {expected.__name__}, got {type(value).__name__}")


@dataclass(frozen=True, kw_only=True)
class ResourceName:
    """
    Amazon Resource Name: `arn:partition:service:region:account-id:resource`.

    `service` e `resource` são obrigatórios. Campos opcionais ausentes (None)
    são formatados como campo vazio, então o número de campos nunca muda e
    `ResourceName.parse(str(arn)) == arn`.

    Ex:
    arn:aws:s3:::mythings/thing-1
    arn:aws:lambda:us-east-2:123456789012:layer:my-layer:3
    """

    partition: Optional[Identifier] = None
    service: Identifier
    region: Optional[Identifier] = None
    account_id: Optional[AccountIdentifier] = None
    resource: ResourceIdentifier

    def __post_init__(self) -> None:
        missing = [name for name in ("service", "resource") if getattr(self, name) is None]
        if missing:
            raise IncompleteArnError(missing)

        _check_type("partition", self.partition, Identifier, optional=True)
        _check_type("service", self.service, Identifier, optional=False)
        _check_type("region", self.region, Identifier, optional=True)
        _check_type("account_id", self.account_id, AccountIdentifier, optional=True)
        _check_type("resource", self.resource, ResourceIdentifier, optional=False)

        # "qualquer conta" tem uma única representação: None
        if self.account_id is not None and self.account_id.is_any():
            object.__setattr__(self, "account_id", None)

    @classmethod
    def parse(cls, arn: str) -> "ResourceName":
        fields = parse_fields(arn)
        return cls(**fields._asdict())

    @classmethod
    def new(cls, service: Identifier, resource: ResourceIdentifier) -> "ResourceName":
        return cls(service=service, resource=resource)

    @classmethod
    def aws(cls, service: Identifier, resource: ResourceIdentifier) -> "ResourceName":
        return cls(
            partition=Identifier.new_unchecked(DEFAULT_PARTITION),
            service=service,
            resource=resource,
        )

    @property
    def partition_or_default(self) -> Identifier:
        return self.partition or Identifier.new_unchecked(DEFAULT_PARTITION)

    def format(self) -> str:
        return FIELD_SEPARATOR.join(
            [
                ARN_PREFIX,
                str(self.partition or ""),
                str(self.service),
                str(self.region or ""),
                str(self.account_id or ""),
                str(self.resource),
            ]
        )

    def __str__(self) -> str:
        return self.format()

    def has_variables(self) -> bool:
        return self.resource.has_variables()

    def expand(self, variables: Mapping[str, Union[str, Identifier]]) -> "ResourceName":
        return replace(self, resource=self.resource.expand(variables))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "partition": str(self.partition) if self.partition else None,
            "service": str(self.service),
            "region": str(self.region) if self.region else None,
            "account_id": str(self.account_id) if self.account_id else None,
            "resource": str(self.resource),
        }

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "ResourceName":
        """
        Inverso de `to_dict`. Campos opcionais aceitam None ou "" e cada campo
        passa pela mesma validação do parser de string.
        """
        unknown = sorted(str(key) for key in set(record) - set(RECORD_FIELDS))
        if unknown:
            raise InvalidRecordError(unknown[0], RECORD_FIELDS)

        # mesma ordem do parser de string: o primeiro campo inválido ganha
        partition = _optional_field(InvalidPartitionError, record.get("partition"))
        service = _required_field(InvalidServiceError, record.get("service"))
        region = _optional_field(InvalidRegionError, record.get("region"))
        account_id = _account_field(record.get("account_id"))

        resource = _resource_field(record.get("resource"))

        return cls(
            partition=partition,
            service=service,
            region=region,
            account_id=account_id,
            resource=resource,
        )


def _required_field(error_cls, value: Any) -> Identifier:
    text = "" if value is None else str(value)
    try:
        return Identifier.parse(text)
    except InvalidIdentifierError as e:
        reason = None if e.char else f"{error_cls.field_name} must not be empty"
        raise error_cls(text, e.position, e.char, reason=reason) from e


def _optional_field(error_cls, value: Any) -> Optional[Identifier]:
    if value is None or value == "":
        return None
    return _required_field(error_cls, value)


def _account_field(value: Any) -> Optional[AccountIdentifier]:
    if value is None or value == "":
        return None
    return AccountIdentifier.parse(str(value))


def _resource_field(value: Any) -> ResourceIdentifier:
    # sem string de ARN: `value` e posições são relativos ao próprio campo
    text = "" if value is None else str(value)
    if not text:
        raise MissingResourceError(text, source="ARN record")
    try:
        return ResourceIdentifier.parse(text)
    except InvalidResourceError as e:
        raise InvalidResourceError(text, e.position, e.char, reason=None if e.char else e.reason) from e
