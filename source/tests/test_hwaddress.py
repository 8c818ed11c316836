import unittest

from wakeonwan.exceptions import HardwareAddressError
from wakeonwan.hwaddress import format_hardware_address, parse_hardware_address

EXPECTED_HWADDR = bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0xAB])


class TestHardwareAddressPositive(unittest.TestCase):

    def test_parse_colon_separated(self):
        result = parse_hardware_address("00:11:22:33:44:ab")
        assert result == EXPECTED_HWADDR, f"Unexpected hardware address. found={result!r}"
        return

    def test_parse_hyphen_separated(self):
        result = parse_hardware_address("00-11-22-33-44-AB")
        assert result == EXPECTED_HWADDR, f"Unexpected hardware address. found={result!r}"
        return

    def test_parse_dotted(self):
        result = parse_hardware_address("0011.2233.44ab")
        assert result == EXPECTED_HWADDR, f"Unexpected hardware address. found={result!r}"
        return

    def test_parse_surrounding_whitespace(self):
        result = parse_hardware_address("  00:11:22:33:44:AB ")
        assert result == EXPECTED_HWADDR, f"Unexpected hardware address. found={result!r}"
        return

    def test_format(self):
        result = format_hardware_address(EXPECTED_HWADDR)
        assert result == "00:11:22:33:44:AB", f"Unexpected formatted address. found={result}"
        return


class TestHardwareAddressNegative(unittest.TestCase):

    def test_parse_mixed_separators(self):
        with self.assertRaises(HardwareAddressError):
            parse_hardware_address("00:11-22:33-44:55")
        return

    def test_parse_too_few_octets(self):
        with self.assertRaises(HardwareAddressError):
            parse_hardware_address("00:11:22:33:44")
        return

    def test_parse_too_many_octets(self):
        with self.assertRaises(HardwareAddressError):
            parse_hardware_address("00:11:22:33:44:55:66")
        return

    def test_parse_non_hex(self):
        with self.assertRaises(HardwareAddressError):
            parse_hardware_address("GG:11:22:33:44:55")
        return

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_hardware_address("not-a-mac")
        return

    def test_format_wrong_length(self):
        with self.assertRaises(HardwareAddressError):
            format_hardware_address(b"\x00\x11")
        return


if __name__ == '__main__':
    unittest.main()
