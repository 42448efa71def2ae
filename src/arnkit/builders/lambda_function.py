"""
Atalhos para ARNs do AWS Lambda.

Formatos:
arn:${Partition}:lambda:${Region}:${Account}:function:${FunctionName}
arn:${Partition}:lambda:${Region}:${Account}:layer:${LayerName}
arn:${Partition}:lambda:${Region}:${Account}:layer:${LayerName}:${LayerVersion}
arn:${Partition}:lambda:${Region}:${Account}:event-source-mapping:${UUID}
"""
from ..arn import ResourceName
from ..builder import ResourceBuilder
from ..models import AccountIdentifier, Identifier, ResourceIdentifier
from .base import BaseServiceBuilder


class LambdaArnBuilder(BaseServiceBuilder):
    service = "lambda"
    resource_types = ("function", "layer", "event-source-mapping")

    def _qualified(
        self,
        region: Identifier,
        account: AccountIdentifier,
        resource: ResourceIdentifier,
    ) -> ResourceName:
        return self._builder().in_region_id(region).owned_by(account).is_(resource).build()

    def function(self, region: Identifier, account: AccountIdentifier, function_name: Identifier) -> ResourceName:
        resource = ResourceBuilder.typed(self._typed("function")).resource_name(function_name).build_qualified_id()
        return self._qualified(region, account, resource)

    def layer(self, region: Identifier, account: AccountIdentifier, layer_name: Identifier) -> ResourceName:
        resource = ResourceBuilder.typed(self._typed("layer")).resource_name(layer_name).build_qualified_id()
        return self._qualified(region, account, resource)

    def layer_version(
        self,
        region: Identifier,
        account: AccountIdentifier,
        layer_name: Identifier,
        layer_version: int,
    ) -> ResourceName:
        resource = (
            ResourceBuilder.typed(self._typed("layer"))
            .resource_name(layer_name)
            .version(layer_version)
            .build_qualified_id()
        )
        return self._qualified(region, account, resource)

    def event_source_mapping(
        self,
        region: Identifier,
        account: AccountIdentifier,
        mapping_uuid: Identifier,
    ) -> ResourceName:
        resource = (
            ResourceBuilder.typed(self._typed("event-source-mapping"))
            .resource_name(mapping_uuid)
            .build_qualified_id()
        )
        return self._qualified(region, account, resource)
