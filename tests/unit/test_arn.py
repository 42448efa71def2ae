import dataclasses

import pytest

from arnkit.arn import ResourceName
from arnkit.models import (
    AccountIdentifier,
    IncompleteArnError,
    Identifier,
    InvalidAccountIdError,
    InvalidIdentifierError,
    InvalidPartitionError,
    InvalidRecordError,
    InvalidRegionError,
    InvalidResourceError,
    InvalidServiceError,
    MissingPrefixError,
    MissingResourceError,
    ResourceIdentifier,
    TooFewFieldsError,
    UnboundVariableError,
)


def test_parse_s3_example():
    arn = ResourceName.parse("arn:aws:s3:::mythings/thing-1")

    assert arn.partition == Identifier("aws")
    assert arn.partition_or_default == Identifier("aws")
    assert arn.service == Identifier("s3")
    assert arn.region is None
    assert arn.account_id is None
    assert arn.resource == ResourceIdentifier.parse("mythings/thing-1")
    assert arn.resource.contains_path()
    assert str(arn) == "arn:aws:s3:::mythings/thing-1"


def test_parse_keeps_colons_inside_resource():
    arn = ResourceName.parse("arn:aws:lambda:us-east-2:123456789012:function:my-fn:1")

    assert arn.region == Identifier("us-east-2")
    assert arn.account_id == AccountIdentifier("123456789012")
    assert str(arn.resource) == "function:my-fn:1"
    assert arn.resource.contains_qualified()


def test_empty_partition_stays_empty_on_format():
    arn = ResourceName.parse("arn::s3:::bucket")

    assert arn.partition is None
    assert arn.partition_or_default == Identifier("aws")
    assert arn.format() == "arn::s3:::bucket"


def test_examples_file_round_trip(example_arns):
    assert example_arns
    for raw in example_arns:
        arn = ResourceName.parse(raw)
        assert str(arn) == raw
        assert ResourceName.parse(str(arn)) == arn


@pytest.mark.parametrize(
    "raw, separators",
    [
        ("arn:aws:s3:mythings/thing-1", 3),
        ("arn", 0),
        ("", 0),
        ("foo:aws:s3", 2),
    ],
)
def test_too_few_fields(raw, separators):
    with pytest.raises(TooFewFieldsError) as exc:
        ResourceName.parse(raw)

    assert exc.value.separators == separators
    assert exc.value.position == len(raw)


@pytest.mark.parametrize("raw", ["arx:aws:s3:::b", "ARN:aws:s3:::b", ":aws:s3:::b"])
def test_missing_prefix(raw):
    with pytest.raises(MissingPrefixError) as exc:
        ResourceName.parse(raw)

    assert exc.value.position == 0


def test_empty_service_is_invalid():
    with pytest.raises(InvalidServiceError) as exc:
        ResourceName.parse("arn:aws::::b")

    assert exc.value.field == "service"
    assert exc.value.position == 8
    assert "service must not be empty" in str(exc.value)


def test_invalid_partition_position_is_absolute():
    with pytest.raises(InvalidPartitionError) as exc:
        ResourceName.parse("arn:a ws:s3:::b")

    assert exc.value.position == 5
    assert exc.value.char == " "
    assert exc.value.field == "partition"
    assert isinstance(exc.value.__cause__, InvalidIdentifierError)


def test_invalid_region():
    with pytest.raises(InvalidRegionError) as exc:
        ResourceName.parse("arn:aws:s3:us/east:123456789012:b")

    assert exc.value.position == 13
    assert exc.value.char == "/"


def test_invalid_account_length():
    with pytest.raises(InvalidAccountIdError) as exc:
        ResourceName.parse("arn:aws:iam::12345:user/x")

    assert exc.value.position == 13
    assert exc.value.value == "arn:aws:iam::12345:user/x"
    assert "got 5" in str(exc.value)


def test_invalid_account_character():
    with pytest.raises(InvalidAccountIdError) as exc:
        ResourceName.parse("arn:aws:iam::12345678901x:user/x")

    assert exc.value.position == 24
    assert exc.value.char == "x"


def test_empty_resource_is_missing():
    with pytest.raises(MissingResourceError) as exc:
        ResourceName.parse("arn:aws:s3:::")

    assert exc.value.position == 13
    assert exc.value.field == "resource"


def test_invalid_resource_position_is_absolute():
    with pytest.raises(InvalidResourceError) as exc:
        ResourceName.parse("arn:aws:s3:::a b")

    assert exc.value.position == 14
    assert exc.value.char == " "


def test_first_error_wins():
    # partition e resource inválidos: partition vem primeiro
    with pytest.raises(InvalidPartitionError):
        ResourceName.parse("arn:a*:s3:::a b")


def test_parse_rejects_non_str():
    with pytest.raises(TypeError):
        ResourceName.parse(b"arn:aws:s3:::b")


def test_any_account_is_folded_to_none():
    arn = ResourceName(
        service=Identifier("s3"),
        account_id=AccountIdentifier.any(),
        resource=ResourceIdentifier.parse("b"),
    )

    assert arn.account_id is None
    assert ResourceName.parse(str(arn)) == arn


def test_constructed_value_is_idempotent():
    arn = ResourceName(
        partition=Identifier("aws-cn"),
        service=Identifier("ec2"),
        region=Identifier("cn-north-1"),
        account_id=AccountIdentifier("123456789012"),
        resource=ResourceIdentifier.parse("vpc/vpc-1a2b3c4d"),
    )

    assert ResourceName.parse(arn.format()) == arn


def test_missing_mandatory_fields():
    with pytest.raises(IncompleteArnError) as exc:
        ResourceName(service=None, resource=None)

    assert exc.value.missing == ["service", "resource"]


def test_wrong_field_types():
    with pytest.raises(TypeError):
        ResourceName(service="s3", resource=ResourceIdentifier.parse("b"))

    with pytest.raises(TypeError):
        ResourceName(
            service=Identifier("iam"),
            account_id=Identifier("123456789012"),
            resource=ResourceIdentifier.parse("root"),
        )


def test_resource_name_is_frozen():
    arn = ResourceName.parse("arn:aws:s3:::b")

    with pytest.raises(dataclasses.FrozenInstanceError):
        arn.service = Identifier("iam")


def test_new_and_aws_constructors():
    resource = ResourceIdentifier.parse("b")

    assert str(ResourceName.new(Identifier("s3"), resource)) == "arn::s3:::b"
    assert str(ResourceName.aws(Identifier("s3"), resource)) == "arn:aws:s3:::b"


def test_expand_resource_variables():
    arn = ResourceName.parse("arn:aws:iam::123456789012:user/${user}")

    assert arn.has_variables()
    expanded = arn.expand({"user": "alice"})
    assert str(expanded) == "arn:aws:iam::123456789012:user/alice"
    assert not expanded.has_variables()

    with pytest.raises(UnboundVariableError):
        arn.expand({})


def test_to_dict_and_from_dict():
    arn = ResourceName.parse("arn:aws:iam::123456789012:user/alice")

    record = arn.to_dict()
    assert record == {
        "partition": "aws",
        "service": "iam",
        "region": None,
        "account_id": "123456789012",
        "resource": "user/alice",
    }
    assert ResourceName.from_dict(record) == arn


def test_from_dict_accepts_empty_optional_fields():
    arn = ResourceName.from_dict({"partition": "", "service": "s3", "region": "", "resource": "b"})

    assert arn == ResourceName.parse("arn::s3:::b")


def test_from_dict_field_errors():
    with pytest.raises(InvalidServiceError):
        ResourceName.from_dict({"resource": "b"})

    with pytest.raises(InvalidServiceError):
        ResourceName.from_dict({"service": "", "resource": "b"})

    with pytest.raises(MissingResourceError):
        ResourceName.from_dict({"service": "s3", "resource": ""})

    with pytest.raises(InvalidAccountIdError):
        ResourceName.from_dict({"service": "s3", "account_id": "123", "resource": "b"})

    with pytest.raises(InvalidRegionError):
        ResourceName.from_dict({"service": "s3", "region": "us east", "resource": "b"})

    with pytest.raises(InvalidRecordError) as exc:
        ResourceName.from_dict({"service": "s3", "resource": "b", "arn": "x"})
    assert exc.value.field == "arn"
    assert isinstance(exc.value, ValueError)


def test_from_dict_errors_carry_field_value():
    with pytest.raises(MissingResourceError) as exc:
        ResourceName.from_dict({"service": "s3"})
    assert exc.value.value == ""
    assert exc.value.field == "resource"
    assert "ARN record" in str(exc.value)

    with pytest.raises(InvalidResourceError) as exc:
        ResourceName.from_dict({"service": "s3", "resource": "a/b c"})
    assert exc.value.value == "a/b c"
    assert exc.value.position == 3
    assert exc.value.char == " "
    assert isinstance(exc.value.__cause__, InvalidResourceError)

    with pytest.raises(InvalidAccountIdError) as exc:
        ResourceName.from_dict({"service": "s3", "account_id": "12345678901x", "resource": "b"})
    assert exc.value.value == "12345678901x"
    assert exc.value.position == 11
