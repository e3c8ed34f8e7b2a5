from unittest import mock

from slowperipheral.uuid_generator import generate


def test_length():
    assert len(generate()) == 16


def test_version_and_variant_bits():
    for _ in range(50):
        uuid = generate()
        assert uuid[6] & 0xF0 == 0x80
        assert uuid[8] & 0xC0 == 0x80


def test_values_differ():
    assert len({generate() for _ in range(20)}) == 20


def test_bits_applied_over_zero_source():
    with mock.patch("secrets.token_bytes", return_value=bytes(16)):
        uuid = generate()
    expected = bytearray(16)
    expected[6] = 0x80
    expected[8] = 0x80
    assert uuid == bytes(expected)