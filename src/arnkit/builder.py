"""
Builders fluentes para ARNs.

O builder só acumula campos já validados (Identifier, AccountIdentifier,
ResourceIdentifier); a única checagem própria é no `build()`, que falha com
IncompleteArnError se service ou resource nunca foram definidos. Todo o resto
é validado pelo próprio ResourceName, igual à construção direta.

Ex:
    arn = (
        ArnBuilder.for_service(Service.LAMBDA)
        .resource(
            ResourceBuilder.typed(Identifier("layer"))
            .resource_name(Identifier("my-layer"))
            .version(3)
            .build_qualified_id()
        )
        .in_region(Region.US_EAST_2)
        .owned_by(AccountIdentifier("123456789012"))
        .build()
    )
    # arn:aws:lambda:us-east-2:123456789012:layer:my-layer:3
"""
from typing import List, Optional, Union

from .arn import ResourceName
from .known import KnownValue, Partition, Region, Service
from .models import AccountIdentifier, IncompleteArnError, Identifier, ResourceIdentifier


def _as_identifier(value: Union[Identifier, KnownValue]) -> Identifier:
    if isinstance(value, KnownValue):
        return value.to_identifier()
    if not isinstance(value, Identifier):
        raise TypeError(f"Expected Identifier or known value, got {type(value).__name__}")
    return value


class ArnBuilder:
    def __init__(self) -> None:
        self._partition: Optional[Identifier] = None
        self._service: Optional[Identifier] = None
        self._region: Optional[Identifier] = None
        self._account_id: Optional[AccountIdentifier] = None
        self._resource: Optional[ResourceIdentifier] = None

    @classmethod
    def service_id(cls, service: Identifier) -> "ArnBuilder":
        return cls().with_service(service)

    @classmethod
    def for_service(cls, service: Service) -> "ArnBuilder":
        return cls().with_service(service)

    def with_service(self, service: Union[Identifier, Service]) -> "ArnBuilder":
        self._service = _as_identifier(service)
        return self

    # partition

    def in_partition_id(self, partition: Identifier) -> "ArnBuilder":
        self._partition = partition
        return self

    def in_partition(self, partition: Union[Identifier, Partition]) -> "ArnBuilder":
        return self.in_partition_id(_as_identifier(partition))

    def in_default_partition(self) -> "ArnBuilder":
        return self.in_partition(Partition.default())

    def in_any_partition(self) -> "ArnBuilder":
        self._partition = None
        return self

    # region

    def in_region_id(self, region: Identifier) -> "ArnBuilder":
        self._region = region
        return self

    def in_region(self, region: Union[Identifier, Region]) -> "ArnBuilder":
        return self.in_region_id(_as_identifier(region))

    def and_region(self, region: Union[Identifier, Region]) -> "ArnBuilder":
        return self.in_region(region)

    def in_any_region(self) -> "ArnBuilder":
        self._region = None
        return self

    # account

    def in_account(self, account: AccountIdentifier) -> "ArnBuilder":
        self._account_id = account
        return self

    def and_account(self, account: AccountIdentifier) -> "ArnBuilder":
        return self.in_account(account)

    def owned_by(self, account: AccountIdentifier) -> "ArnBuilder":
        return self.in_account(account)

    def in_any_account(self) -> "ArnBuilder":
        self._account_id = None
        return self

    # resource

    def resource(self, resource: ResourceIdentifier) -> "ArnBuilder":
        self._resource = resource
        return self

    def is_(self, resource: ResourceIdentifier) -> "ArnBuilder":
        return self.resource(resource)

    def build(self) -> ResourceName:
        missing = [
            name
            for name, value in (("service", self._service), ("resource", self._resource))
            if value is None
        ]
        if missing:
            raise IncompleteArnError(missing)

        return ResourceName(
            partition=self._partition,
            service=self._service,
            region=self._region,
            account_id=self._account_id,
            resource=self._resource,
        )

    def __repr__(self) -> str:
        return (
            f"ArnBuilder(partition={self._partition!r}, service={self._service!r}, "
            f"region={self._region!r}, account_id={self._account_id!r}, resource={self._resource!r})"
        )


class ResourceBuilder:
    """
    Junta componentes de resource e gera um path ('/') ou um id qualificado (':').
    """

    def __init__(self) -> None:
        self._components: List[ResourceIdentifier] = []

    @classmethod
    def named(cls, name: Identifier) -> "ResourceBuilder":
        return cls().resource_name(name)

    @classmethod
    def typed(cls, type_name: Identifier) -> "ResourceBuilder":
        return cls().type_name(type_name)

    def add(self, component: Union[ResourceIdentifier, Identifier]) -> "ResourceBuilder":
        if isinstance(component, Identifier):
            component = ResourceIdentifier.from_identifier(component)
        elif not isinstance(component, ResourceIdentifier):
            raise TypeError(
                f"Expected ResourceIdentifier or Identifier, got {type(component).__name__}"
            )
        self._components.append(component)
        return self

    def qualified_name(self, component: ResourceIdentifier) -> "ResourceBuilder":
        return self.add(component)

    def resource_path(self, component: ResourceIdentifier) -> "ResourceBuilder":
        return self.add(component)

    def type_name(self, name: Identifier) -> "ResourceBuilder":
        return self.add(name)

    def resource_name(self, name: Identifier) -> "ResourceBuilder":
        return self.add(name)

    def sub_resource_name(self, name: Identifier) -> "ResourceBuilder":
        return self.add(name)

    def version(self, version: int) -> "ResourceBuilder":
        if isinstance(version, bool) or not isinstance(version, int) or version < 0:
            raise ValueError(f"Version must be a non-negative int, got {version!r}")
        return self.add(Identifier.new_unchecked(str(version)))

    def variable(self, name: Identifier) -> "ResourceBuilder":
        return self.add(ResourceIdentifier.variable(name))

    def _check_not_empty(self) -> None:
        if not self._components:
            raise IncompleteArnError(["resource"])

    def build_resource_path(self) -> ResourceIdentifier:
        self._check_not_empty()
        return ResourceIdentifier.from_path(self._components)

    def build_qualified_id(self) -> ResourceIdentifier:
        self._check_not_empty()
        return ResourceIdentifier.from_qualified(self._components)
