"""Unit tests for stream merging, header carrying, and the full merge.

WHY: The merged file is parsed by embroidery machines and software, so
every byte matters: the wrapper records, the letter order, and the
carried header.

HOW: Tests cover the wrapper invariant, the length law, order
preservation, single-letter identity, the documented end-to-end scenario,
determinism, and each failure mode.
"""

import pytest

from conftest import COLOR_CHANGE, END, HEADER_SIZE, filtered, make_design, make_header

from dst_merger.core.errors import EmptyMergeRequest, MalformedRecordStream
from dst_merger.core.merger import attach_header, merge_designs, merge_streams


class TestMergeStreams:
    """merge_streams() wraps the concatenated streams."""

    def test_wrapper_records(self):
        payload = merge_streams([b"\x01\x01\x01"])
        assert payload[:3] == COLOR_CHANGE
        assert payload[-3:] == END

    def test_empty_streams_still_wrapped(self):
        assert merge_streams([b"", b""]) == COLOR_CHANGE + END

    def test_length_law(self):
        streams = [b"\x01\x02\x03" * 4, b"", b"\x04\x05\x06" * 7]
        assert len(merge_streams(streams)) == 6 + sum(len(s) for s in streams)

    def test_order_preserved(self):
        a = bytes.fromhex("0A0A01")
        b = bytes.fromhex("0B0B02")
        assert merge_streams([a, b])[3:-3] == a + b
        assert merge_streams([b, a])[3:-3] == b + a

    def test_no_control_records_between_wrappers(self):
        payload = merge_streams([filtered("A"), filtered("C")])
        middle = payload[3:-3]
        assert all(middle[i + 2] not in (0xF0, 0xF3) for i in range(0, len(middle), 3))

    def test_deterministic(self):
        streams = [filtered("A"), filtered("B")]
        assert merge_streams(streams) == merge_streams(streams)

    def test_empty_request_rejected(self):
        with pytest.raises(EmptyMergeRequest):
            merge_streams([])


class TestAttachHeader:

    def test_concatenation(self):
        header = make_header("H")
        assert attach_header(header, b"\x00\x00\xf3") == header + b"\x00\x00\xf3"

    def test_header_not_modified(self):
        header = make_header("KEEP")
        assert attach_header(header, b"")[:HEADER_SIZE] == header

    def test_wrong_header_size_rejected(self):
        with pytest.raises(ValueError):
            attach_header(b"\x00" * 100, b"")


class TestMergeDesigns:
    """merge_designs() runs split → filter → merge → attach."""

    def test_end_to_end_scenario(self):
        header_a = make_header("A")
        header_b = make_header("B")
        buffer_a = header_a + bytes.fromhex("000001 0000F0")
        buffer_b = header_b + bytes.fromhex("101002 0000F3")

        merged = merge_designs([buffer_a, buffer_b], word="AB")

        assert merged.data == header_a + bytes.fromhex("0000F0 000001 101002 0000F3")
        assert merged.header == header_a
        assert merged.filename == "AB.dst"

    def test_single_letter_identity(self, design_a):
        merged = merge_designs([design_a], word="A")
        assert merged.header == design_a[:HEADER_SIZE]
        assert merged.payload[3:-3] == filtered("A")

    def test_first_header_wins(self, design_a, design_b):
        merged = merge_designs([design_b, design_a], word="BA")
        assert merged.data[:HEADER_SIZE] == make_header("B")

    def test_payload_order_follows_input(self, design_a, design_b, design_c):
        merged = merge_designs([design_c, design_a, design_b], word="CAB")
        assert merged.payload == COLOR_CHANGE + filtered("C") + filtered("A") + filtered("B") + END

    def test_stitch_count_and_length(self, design_a, design_b):
        merged = merge_designs([design_a, design_b], word="AB")
        assert merged.stitch_count == 4
        assert len(merged) == HEADER_SIZE + 6 + len(filtered("A")) + len(filtered("B"))
        assert len(merged) == len(merged.data)

    def test_repeated_letter(self, design_a):
        merged = merge_designs([design_a, design_a], word="AA")
        assert merged.payload[3:-3] == filtered("A") * 2

    def test_anonymous_merge(self, design_a):
        merged = merge_designs([design_a])
        assert merged.word == ""
        assert merged.filename == "design.dst"

    def test_word_length_mismatch_rejected(self, design_a):
        with pytest.raises(ValueError, match="Word 'AB' has 2 letters but 1 designs"):
            merge_designs([design_a], word="AB")

    def test_more_designs_than_letters_rejected(self, design_a, design_b):
        with pytest.raises(ValueError):
            merge_designs([design_a, design_b], word="A")

    def test_empty_request_rejected(self):
        with pytest.raises(EmptyMergeRequest):
            merge_designs([])

    def test_malformed_letter_fails_whole_merge(self, design_a):
        broken = make_design("B", [b"\x01\x02"])
        with pytest.raises(MalformedRecordStream, match="Letter 'B'"):
            merge_designs([design_a, broken], word="AB")

    def test_short_buffer_fails(self, design_a):
        with pytest.raises(MalformedRecordStream):
            merge_designs([design_a, b"\x00" * 10], word="AB")

    def test_inputs_not_modified(self, design_a, design_b):
        a_before, b_before = bytes(design_a), bytes(design_b)
        merge_designs([design_a, design_b], word="AB")
        assert design_a == a_before
        assert design_b == b_before
