import pytest

from arnkit.arn import ResourceName
from arnkit.builders import get_builder_for_arn, get_builder_for_service, load_builders
from arnkit.builders.base import BaseServiceBuilder
from arnkit.builders.cognito_identity import CognitoIdentityArnBuilder
from arnkit.builders.iam import IamArnBuilder
from arnkit.builders.lambda_function import LambdaArnBuilder
from arnkit.builders.s3 import S3ArnBuilder
from arnkit.models import AccountIdentifier, Identifier

ACCOUNT = AccountIdentifier("123456789012")
REGION = Identifier("us-east-2")


def test_s3_bucket_and_object():
    s3 = S3ArnBuilder.in_default_partition()

    assert str(s3.bucket(Identifier("b"))) == "arn:aws:s3:::b"
    assert str(s3.object(Identifier("b"), Identifier("k.txt"))) == "arn:aws:s3:::b/k.txt"
    # sem partition: campo vazio
    assert str(S3ArnBuilder().bucket(Identifier("b"))) == "arn::s3:::b"


def test_s3_object_from_bucket():
    bucket = ResourceName.parse("arn:aws:s3:::mythings")

    obj = S3ArnBuilder.object_from(bucket, Identifier("thing-1"))

    assert obj == ResourceName.parse("arn:aws:s3:::mythings/thing-1")


def test_s3_object_from_other_service_fails():
    with pytest.raises(ValueError):
        S3ArnBuilder.object_from(ResourceName.parse("arn:aws:iam::123456789012:root"), Identifier("k"))


def test_s3_job():
    arn = S3ArnBuilder.in_default_partition().job(Identifier("us-east-1"), ACCOUNT, Identifier("job-1"))

    assert str(arn) == "arn:aws:s3:us-east-1:123456789012:job/job-1"


def test_iam_resources():
    iam = IamArnBuilder.in_default_partition()

    assert str(iam.root(ACCOUNT)) == "arn:aws:iam::123456789012:root"
    assert str(iam.user(ACCOUNT, Identifier("alice"))) == "arn:aws:iam::123456789012:user/alice"
    assert str(iam.role(ACCOUNT, Identifier("admin"))) == "arn:aws:iam::123456789012:role/admin"
    assert str(iam.group(ACCOUNT, Identifier("devs"))) == "arn:aws:iam::123456789012:group/devs"
    assert str(iam.policy(ACCOUNT, Identifier("p1"))) == "arn:aws:iam::123456789012:policy/p1"


def test_lambda_resources():
    lam = LambdaArnBuilder(Identifier("aws"))

    assert str(lam.function(REGION, ACCOUNT, Identifier("fn"))) == "arn:aws:lambda:us-east-2:123456789012:function:fn"
    assert str(lam.layer(REGION, ACCOUNT, Identifier("lib"))) == "arn:aws:lambda:us-east-2:123456789012:layer:lib"
    assert (
        str(lam.layer_version(REGION, ACCOUNT, Identifier("lib"), 3))
        == "arn:aws:lambda:us-east-2:123456789012:layer:lib:3"
    )
    assert (
        str(lam.event_source_mapping(REGION, ACCOUNT, Identifier("abc-123")))
        == "arn:aws:lambda:us-east-2:123456789012:event-source-mapping:abc-123"
    )


def test_cognito_identity_pool():
    arn = CognitoIdentityArnBuilder.in_default_partition().identity_pool(
        Identifier("us-east-1"), ACCOUNT, Identifier("us-east-1_abc")
    )

    assert str(arn) == "arn:aws:cognito-identity:us-east-1:123456789012:identitypool/us-east-1_abc"


@pytest.mark.parametrize(
    "raw, builder_cls, kind",
    [
        ("arn:aws:iam::123456789012:role/admin", IamArnBuilder, "role"),
        ("arn:aws:iam::123456789012:root", IamArnBuilder, "root"),
        ("arn:aws:s3:::b", S3ArnBuilder, "bucket"),
        ("arn:aws:s3:::b/k", S3ArnBuilder, "object"),
        ("arn:aws:s3:us-east-1:123456789012:job/j", S3ArnBuilder, "job"),
        ("arn:aws:lambda:us-east-2:123456789012:layer:lib:3", LambdaArnBuilder, "layer"),
        ("arn:aws:lambda:us-east-2:123456789012:${kind}:x", LambdaArnBuilder, None),
    ],
)
def test_resource_kind(raw, builder_cls, kind):
    arn = ResourceName.parse(raw)

    assert get_builder_for_arn(arn) is builder_cls
    assert builder_cls.resource_kind(arn) == kind


def test_registry_lookup():
    load_builders()

    services = {b.service for b in BaseServiceBuilder.registry}
    assert {"s3", "iam", "lambda", "cognito-identity"} <= services
    assert get_builder_for_service("S3") is S3ArnBuilder
    assert get_builder_for_arn(ResourceName.parse("arn:aws:sqs:eu-west-1:123456789012:q")) is None

    with pytest.raises(ValueError):
        get_builder_for_service("sqs")
