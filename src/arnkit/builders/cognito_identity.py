"""
Atalhos para ARNs do Amazon Cognito Identity.

arn:${Partition}:cognito-identity:${Region}:${Account}:identitypool/${IdentityPoolId}
"""
from ..arn import ResourceName
from ..builder import ResourceBuilder
from ..models import AccountIdentifier, Identifier
from .base import BaseServiceBuilder


class CognitoIdentityArnBuilder(BaseServiceBuilder):
    service = "cognito-identity"
    resource_types = ("identitypool",)

    def identity_pool(
        self,
        region: Identifier,
        account: AccountIdentifier,
        identity_pool_id: Identifier,
    ) -> ResourceName:
        return (
            self._builder()
            .in_region_id(region)
            .owned_by(account)
            .is_(
                ResourceBuilder.typed(self._typed("identitypool"))
                .resource_name(identity_pool_id)
                .build_resource_path()
            )
            .build()
        )
