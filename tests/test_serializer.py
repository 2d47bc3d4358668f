"""Unit tests for the outbound protocol serializer."""
import unittest

from soehnle.errors import TareValueError
from soehnle.models import (
    ClearTare,
    Once,
    OnceOnChange,
    SetTare,
    Status,
    Tare,
    WithAck,
)
from soehnle.protocol import ProtocolSerializer


class TestSerializeCommand(unittest.TestCase):

    def test_tare(self):
        self.assertEqual(ProtocolSerializer.serialize_command(Tare()), "<T>")

    def test_clear_tare(self):
        self.assertEqual(ProtocolSerializer.serialize_command(ClearTare()), "<TC>")

    def test_set_tare_zero_padded(self):
        self.assertEqual(ProtocolSerializer.serialize_command(SetTare(0)), "<T0000000>")
        self.assertEqual(ProtocolSerializer.serialize_command(SetTare(1234)), "<T0001234>")

    def test_set_tare_max(self):
        self.assertEqual(ProtocolSerializer.serialize_command(SetTare(9_999_999)), "<T9999999>")

    def test_set_tare_out_of_range(self):
        for value in (10_000_000, 99_999_999, -1):
            with self.subTest(value=value):
                with self.assertRaises(TareValueError):
                    ProtocolSerializer.serialize_command(SetTare(value))

    def test_set_tare_not_an_integer(self):
        for value in (1.5, "12", True):
            with self.subTest(value=value):
                with self.assertRaises(TareValueError):
                    ProtocolSerializer.serialize_command(SetTare(value))

    def test_with_ack_flag(self):
        self.assertEqual(ProtocolSerializer.serialize_command(Tare(), ack=True), "<t>")
        self.assertEqual(ProtocolSerializer.serialize_command(ClearTare(), ack=True), "<tC>")
        self.assertEqual(ProtocolSerializer.serialize_command(SetTare(0), ack=True), "<t0000000>")
        self.assertEqual(ProtocolSerializer.serialize_command(SetTare(42), ack=True), "<t0000042>")

    def test_with_ack_out_of_range(self):
        with self.assertRaises(TareValueError):
            ProtocolSerializer.serialize_command(SetTare(99_999_999), ack=True)

    def test_unknown_command(self):
        with self.assertRaises(ValueError):
            ProtocolSerializer.serialize_command(Once())


class TestSerializeQuery(unittest.TestCase):

    def test_once(self):
        self.assertEqual(ProtocolSerializer.serialize_query(Once()), "<A>")
        self.assertEqual(ProtocolSerializer.serialize_query(Once(), ack=True), "<a>")

    def test_once_on_change(self):
        self.assertEqual(ProtocolSerializer.serialize_query(OnceOnChange()), "<B>")
        self.assertEqual(ProtocolSerializer.serialize_query(OnceOnChange(), ack=True), "<b>")

    def test_unknown_query(self):
        with self.assertRaises(ValueError):
            ProtocolSerializer.serialize_query(Tare())


class TestSerialize(unittest.TestCase):
    """Tests for the generic entry point and the WithAck wrapper."""

    CASES = [
        (Tare(), "<T>", "<t>"),
        (ClearTare(), "<TC>", "<tC>"),
        (SetTare(0), "<T0000000>", "<t0000000>"),
        (SetTare(9_999_999), "<T9999999>", "<t9999999>"),
        (Once(), "<A>", "<a>"),
        (OnceOnChange(), "<B>", "<b>"),
    ]

    def test_plain_and_wrapped(self):
        for outbound, plain, acked in self.CASES:
            with self.subTest(outbound=outbound):
                self.assertEqual(ProtocolSerializer.serialize(outbound), plain)
                self.assertEqual(ProtocolSerializer.serialize(WithAck(outbound)), acked)

    def test_wrapper_matches_flag(self):
        for outbound, _, _ in self.CASES:
            with self.subTest(outbound=outbound):
                if isinstance(outbound, (Once, OnceOnChange)):
                    flagged = ProtocolSerializer.serialize_query(outbound, ack=True)
                else:
                    flagged = ProtocolSerializer.serialize_command(outbound, ack=True)
                self.assertEqual(ProtocolSerializer.serialize(WithAck(outbound)), flagged)

    def test_wrapped_out_of_range(self):
        with self.assertRaises(TareValueError):
            ProtocolSerializer.serialize(WithAck(SetTare(99_999_999)))

    def test_idempotent(self):
        for outbound, _, _ in self.CASES:
            with self.subTest(outbound=outbound):
                first = ProtocolSerializer.serialize(outbound)
                self.assertEqual(ProtocolSerializer.serialize(outbound), first)
                self.assertEqual(ProtocolSerializer.serialize(WithAck(outbound)),
                                 ProtocolSerializer.serialize(WithAck(outbound)))

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            ProtocolSerializer.serialize(Status(False, False, False, False))


if __name__ == "__main__":
    unittest.main()
