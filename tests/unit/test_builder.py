import pytest

from arnkit.arn import ResourceName
from arnkit.builder import ArnBuilder, ResourceBuilder
from arnkit.known import Partition, Region, Service
from arnkit.models import AccountIdentifier, IncompleteArnError, Identifier, ResourceIdentifier


def test_builder_matches_parsed_arn():
    arn = (
        ArnBuilder.service_id(Identifier("s3"))
        .resource(ResourceIdentifier.parse("mythings/thing-1"))
        .in_partition_id(Identifier("aws"))
        .build()
    )

    assert arn == ResourceName.parse("arn:aws:s3:::mythings/thing-1")


def test_builder_with_known_values():
    arn = (
        ArnBuilder.for_service(Service.LAMBDA)
        .resource(
            ResourceBuilder.typed(Identifier("layer"))
            .resource_name(Identifier("my-layer"))
            .version(3)
            .build_qualified_id()
        )
        .in_default_partition()
        .in_region(Region.US_EAST_2)
        .owned_by(AccountIdentifier("123456789012"))
        .build()
    )

    assert str(arn) == "arn:aws:lambda:us-east-2:123456789012:layer:my-layer:3"


def test_builder_any_resets_optional_fields():
    arn = (
        ArnBuilder.service_id(Identifier("s3"))
        .in_partition(Partition.AWS_CN)
        .and_region(Identifier("cn-north-1"))
        .and_account(AccountIdentifier("123456789012"))
        .in_any_partition()
        .in_any_region()
        .in_any_account()
        .is_(ResourceIdentifier.parse("b"))
        .build()
    )

    assert str(arn) == "arn::s3:::b"


def test_builder_missing_fields():
    with pytest.raises(IncompleteArnError) as exc:
        ArnBuilder().build()
    assert exc.value.missing == ["service", "resource"]

    with pytest.raises(IncompleteArnError) as exc:
        ArnBuilder.service_id(Identifier("s3")).build()
    assert exc.value.missing == ["resource"]

    with pytest.raises(IncompleteArnError) as exc:
        ArnBuilder().resource(ResourceIdentifier.parse("b")).build()
    assert exc.value.missing == ["service"]


def test_builder_rejects_raw_strings():
    with pytest.raises(TypeError):
        ArnBuilder().in_region("us-east-1")

    with pytest.raises(TypeError):
        ArnBuilder().with_service("s3")


def test_builder_repr():
    builder = ArnBuilder.service_id(Identifier("s3"))

    assert "ArnBuilder(" in repr(builder)
    assert "s3" in repr(builder)


def test_resource_builder_path_and_qualified():
    builder = (
        ResourceBuilder.typed(Identifier("role"))
        .resource_path(ResourceIdentifier.parse("service-role"))
        .resource_name(Identifier("my-role"))
    )
    assert builder.build_resource_path() == ResourceIdentifier.parse("role/service-role/my-role")

    qualified = (
        ResourceBuilder.named(Identifier("function"))
        .qualified_name(ResourceIdentifier.parse("my-fn"))
        .sub_resource_name(Identifier("PROD"))
        .build_qualified_id()
    )
    assert qualified == ResourceIdentifier.parse("function:my-fn:PROD")


def test_resource_builder_variable():
    resource = ResourceBuilder.typed(Identifier("user")).variable(Identifier("user_name")).build_resource_path()

    assert str(resource) == "user/${user_name}"
    assert resource.has_variables()


@pytest.mark.parametrize("version", [-1, True, "3", 1.5])
def test_resource_builder_rejects_bad_version(version):
    with pytest.raises(ValueError):
        ResourceBuilder.typed(Identifier("layer")).version(version)


def test_resource_builder_empty():
    with pytest.raises(IncompleteArnError):
        ResourceBuilder().build_resource_path()

    with pytest.raises(IncompleteArnError):
        ResourceBuilder().build_qualified_id()


def test_resource_builder_add_rejects_strings():
    with pytest.raises(TypeError):
        ResourceBuilder().add("bucket")
