import unittest

from wakeonwan.magicpacket import build_magic_packet, MAGIC_PACKET_LENGTH


class TestMagicPacket(unittest.TestCase):

    def check_packet_structure(self, hwaddr: bytes):
        packet = build_magic_packet(hwaddr)

        assert len(packet) == 102, f"The magic packet should be 102 bytes long. found={len(packet)}"
        assert packet[0:6] == b"\xff" * 6, "The sync stream should be 6 bytes of 0xFF."

        for i in range(16):
            offset = 6 + i * 6
            assert packet[offset:offset + 6] == hwaddr, f"Hardware address repetition {i} should match the hardware address."

        return

    def test_packet_structure(self):
        self.check_packet_structure(bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0x55]))
        return

    def test_packet_structure_all_ones(self):
        self.check_packet_structure(b"\xff" * 6)
        return

    def test_packet_structure_all_zeros(self):
        self.check_packet_structure(b"\x00" * 6)
        return

    def test_packet_length_constant(self):
        assert MAGIC_PACKET_LENGTH == 102, "The magic packet length constant should be 102."
        return

    def test_packet_is_deterministic(self):
        hwaddr = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF])
        assert build_magic_packet(hwaddr) == build_magic_packet(hwaddr), "Equal inputs should build equal packets."
        return

    def test_packet_accepts_bytearray(self):
        hwaddr = bytearray([0x00, 0x11, 0x22, 0x33, 0x44, 0x55])
        packet = build_magic_packet(hwaddr)
        assert isinstance(packet, bytes), "The magic packet should be immutable bytes."
        assert packet[6:12] == bytes(hwaddr)
        return

    def test_short_hardware_address(self):
        with self.assertRaises(ValueError):
            build_magic_packet(b"\x00\x11\x22\x33\x44")
        return

    def test_long_hardware_address(self):
        with self.assertRaises(ValueError):
            build_magic_packet(b"\x00\x11\x22\x33\x44\x55\x66\x77")
        return


if __name__ == '__main__':
    unittest.main()
