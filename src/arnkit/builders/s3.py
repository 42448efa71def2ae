"""
Atalhos para ARNs do Amazon S3.

Formatos:
arn:${Partition}:s3:::${BucketName}
arn:${Partition}:s3:::${BucketName}/${ObjectName}
arn:${Partition}:s3:${Region}:${Account}:job/${JobId}
"""
from ..arn import ResourceName
from ..models import AccountIdentifier, Identifier, ResourceIdentifier
from .base import BaseServiceBuilder


class S3ArnBuilder(BaseServiceBuilder):
    service = "s3"
    resource_types = ("job",)

    def bucket(self, bucket_name: Identifier) -> ResourceName:
        return self._builder().is_(ResourceIdentifier.from_identifier(bucket_name)).build()

    def object(self, bucket_name: Identifier, object_name: Identifier) -> ResourceName:
        return (
            self._builder()
            .is_(ResourceIdentifier.from_id_path([bucket_name, object_name]))
            .build()
        )

    @classmethod
    def object_from(cls, bucket: ResourceName, object_name: Identifier) -> ResourceName:
        """
        Monta o ARN de um objeto a partir do ARN do bucket; os demais campos
        são copiados do bucket.
        """
        if not cls.supports(bucket):
            raise ValueError(f"You can't make an S3 object from a {bucket.service} ARN.")
        return ResourceName(
            partition=bucket.partition,
            service=bucket.service,
            region=bucket.region,
            account_id=bucket.account_id,
            resource=ResourceIdentifier.from_path(
                [bucket.resource, ResourceIdentifier.from_identifier(object_name)]
            ),
        )

    def job(self, region: Identifier, account: AccountIdentifier, job_id: Identifier) -> ResourceName:
        return (
            self._builder()
            .in_region_id(region)
            .owned_by(account)
            .is_(ResourceIdentifier.from_id_path([self._typed("job"), job_id]))
            .build()
        )

    @classmethod
    def resource_kind(cls, arn: ResourceName):
        kind = super().resource_kind(arn)
        if kind:
            return kind
        # sem region/account o resource é bucket ou bucket/objeto
        return "object" if arn.resource.contains_path() else "bucket"
