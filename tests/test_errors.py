import pytest

from robloxtypes.errors import AttributeFormatError, RbxTypesError
from robloxtypes.variant import VariantType


def test_hierarchy():
    error = AttributeFormatError.no_key()
    assert str(error) == "missing attribute key name"
    assert isinstance(error, RbxTypesError)
    assert isinstance(error, ValueError)
    with pytest.raises(RbxTypesError, match="missing attribute key name"):
        raise error


def test_fixed_messages():
    assert str(AttributeFormatError.invalid_length()) == "missing attribute list length"
    assert str(AttributeFormatError.no_key()) == "missing attribute key name"
    assert str(AttributeFormatError.no_value_type()) == "missing attribute value type"


def test_parameterised_messages():
    assert str(AttributeFormatError.invalid_value_type(7)) == "invalid value type: 7"
    assert str(AttributeFormatError.invalid_brick_color(9999)) == "invalid BrickColor value: 9999"
    assert (
        str(AttributeFormatError.read_type("bool"))
        == "couldn't read bytes to deserialize bool"
    )


def test_unsupported_variant_type_uses_type_name():
    error = AttributeFormatError.unsupported_variant_type(VariantType.Ref)
    assert str(error) == "Ref values are not supported in attributes"


def test_key_bad_unicode_keeps_cause():
    with pytest.raises(UnicodeDecodeError) as info:
        b"\xff".decode("utf-8")
    error = AttributeFormatError.key_bad_unicode(info.value)
    assert str(error) == "attribute key contained invalid UTF-8"
    assert error.__cause__ is info.value


def test_io_error_is_transparent():
    source = OSError("disk gone")
    error = AttributeFormatError.io_error(source)
    assert str(error) == str(source)
    assert error.__cause__ is source