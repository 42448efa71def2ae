"""
Atalhos para ARNs do IAM.

Formatos:
arn:aws:iam::${Account}:root
arn:${Partition}:iam::${Account}:user/${UserName}
arn:${Partition}:iam::${Account}:role/${RoleName}
arn:${Partition}:iam::${Account}:group/${GroupName}
arn:${Partition}:iam::${Account}:policy/${PolicyName}
"""
from ..arn import ResourceName
from ..models import AccountIdentifier, Identifier, ResourceIdentifier
from .base import BaseServiceBuilder


class IamArnBuilder(BaseServiceBuilder):
    service = "iam"
    resource_types = ("root", "user", "role", "group", "policy")

    def root(self, account: AccountIdentifier) -> ResourceName:
        return (
            self._builder()
            .owned_by(account)
            .is_(ResourceIdentifier.from_identifier(self._typed("root")))
            .build()
        )

    def _named(self, type_name: str, account: AccountIdentifier, name: Identifier) -> ResourceName:
        return (
            self._builder()
            .owned_by(account)
            .is_(ResourceIdentifier.from_id_path([self._typed(type_name), name]))
            .build()
        )

    def user(self, account: AccountIdentifier, user_name: Identifier) -> ResourceName:
        return self._named("user", account, user_name)

    def role(self, account: AccountIdentifier, role_name: Identifier) -> ResourceName:
        return self._named("role", account, role_name)

    def group(self, account: AccountIdentifier, group_name: Identifier) -> ResourceName:
        return self._named("group", account, group_name)

    def policy(self, account: AccountIdentifier, policy_name: Identifier) -> ResourceName:
        return self._named("policy", account, policy_name)
