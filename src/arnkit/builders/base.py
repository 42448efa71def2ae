from abc import ABC
from typing import ClassVar, List, Optional, Tuple, Type

from ..arn import ResourceName
from ..builder import ArnBuilder
from ..known import Partition
from ..models import Identifier, LiteralSegment


class BaseServiceBuilder(ABC):
    """
    Classe base para os builders específicos de serviço.

    Mantém um registry automático das subclasses concretas (qualquer subclass
    que declare `service`). Os builders são só atalhos sobre o ArnBuilder:
    recebem Identifier/AccountIdentifier já validados e nunca montam strings.
    """

    # registro global de builders concretos
    registry: ClassVar[List[Type["BaseServiceBuilder"]]] = []

    # Namespace do serviço AWS no ARN (s3, iam, lambda...)
    service: ClassVar[str] = ""

    # Tipos de recurso (primeiro segmento do resource) que o builder conhece
    resource_types: ClassVar[Tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs):
        """
        Sempre que uma subclass com `service` é criada, ela entra no registry.
        """
        super().__init_subclass__(**kwargs)

        if not cls.service:
            return

        BaseServiceBuilder.registry.append(cls)

    def __init__(self, partition: Optional[Identifier] = None) -> None:
        self.partition = partition

    @classmethod
    def in_default_partition(cls) -> "BaseServiceBuilder":
        return cls(Partition.default().to_identifier())

    @classmethod
    def supports(cls, arn: ResourceName) -> bool:
        return str(arn.service) == cls.service

    @classmethod
    def resource_kind(cls, arn: ResourceName) -> Optional[str]:
        """
        Retorna o tipo do recurso (ex.: 'role', 'layer') quando o primeiro
        segmento do resource for um dos `resource_types` conhecidos.
        """
        first = arn.resource.segments[0]
        if isinstance(first, LiteralSegment) and str(first.identifier) in cls.resource_types:
            return str(first.identifier)
        return None

    def _builder(self) -> ArnBuilder:
        builder = ArnBuilder.service_id(Identifier.new_unchecked(self.service))
        if self.partition is not None:
            builder.in_partition_id(self.partition)
        return builder

    def _typed(self, type_name: str) -> Identifier:
        return Identifier.new_unchecked(type_name)
