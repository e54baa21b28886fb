import pytest

from idxdkit.descriptor import (
    CompletionRecord,
    DsaCompletionStatus,
    DsaOpcode,
    HwDescriptor,
    IaxCompletionStatus,
    IaxOpcode,
    OpFlag,
    WinAttach,
    WinFault,
    WinFlag,
    WinParam,
    WinType,
    completion_status_code,
    decode_scmd_status,
    parse_completion_record,
    parse_descriptor,
)


def test_descriptor_is_64_zero_bytes_by_default():
    assert HwDescriptor().to_bytes() == bytes(64)


def test_opcode_occupies_top_byte_of_second_word():
    desc = HwDescriptor(opcode=DsaOpcode.MEMMOVE)
    assert desc.to_bytes()[7] == DsaOpcode.MEMMOVE
    assert desc.get_field("flags") == 0


def test_flags_and_opcode_share_word_without_interference():
    desc = HwDescriptor()
    desc.set_field("flags", OpFlag.CRAV | OpFlag.RCR | OpFlag.WR_SRC2_CMPL)
    desc.set_field("opcode", IaxOpcode.COMPRESS)
    assert desc.get_field("flags") == OpFlag.CRAV | OpFlag.RCR | OpFlag.WR_SRC2_CMPL
    assert desc.get_field("opcode") == IaxOpcode.COMPRESS


def test_priv_bit_is_high_bit_of_first_word():
    desc = HwDescriptor(priv=1)
    assert desc.to_bytes()[3] == 0x80
    assert desc.get_field("pasid") == 0


def test_pasid_roundtrip_beside_priv():
    desc = HwDescriptor(pasid=0xFFFFF, priv=1)
    assert desc.get_field("pasid") == 0xFFFFF
    assert desc.get_field("priv") == 1
    assert desc.get_field("rsvd") == 0


def test_union_aliases_share_bytes():
    desc = HwDescriptor(src_addr=0x1122334455667788)
    assert desc.get_field("pattern") == 0x1122334455667788
    assert desc.get_field("desc_list_addr") == 0x1122334455667788
    desc.set_field("xfer_size", 4096)
    assert desc.get_field("desc_count") == 4096


def test_address_fields_are_little_endian():
    desc = HwDescriptor(completion_addr=0x0102030405060708)
    assert desc.to_bytes()[8:16] == (0x0102030405060708).to_bytes(8, "little")


def test_iax_fields_overlap_op_specific():
    desc = HwDescriptor(iax_src2_addr=0xABCDEF, iax_max_dst_size=0x1000)
    ops = desc.get_field("op_specific")
    assert len(ops) == 24
    assert ops[:8] == (0xABCDEF).to_bytes(8, "little")
    assert desc.get_field("iax_crc64_rsvd") == 0xABCDEF


def test_unrestricted_pasid_bitfields():
    desc = HwDescriptor(src_pasid=0x12345, unrest_src_priv=1, dest_pasid=0x54321)
    assert desc.get_field("addr1_pasid") == 0x12345
    assert desc.get_field("addr1_priv") == 1
    assert desc.get_field("src2_pasid") == 0x54321
    assert desc.get_field("unrest_ip_res2") == 0


def test_ipt_handle_follows_48_bit_reserved():
    desc = HwDescriptor(ipt_handle=0xBEEF)
    assert desc.to_bytes()[62:64] == (0xBEEF).to_bytes(2, "little")
    assert desc.get_field("unrest_ip_res10") == 0


def test_byte_array_field_roundtrip_and_length_check():
    desc = HwDescriptor()
    desc.set_field("dif_chk_res2", b"\x01\x02\x03\x04\x05")
    assert desc.get_field("dif_chk_res2") == b"\x01\x02\x03\x04\x05"
    with pytest.raises(ValueError):
        desc.set_field("dif_chk_res2", b"\x01")


def test_value_too_wide_raises():
    desc = HwDescriptor()
    with pytest.raises(ValueError):
        desc.set_field("xfer_size", 1 << 32)
    with pytest.raises(ValueError):
        desc.set_field("pasid", 1 << 20)
    with pytest.raises(ValueError):
        desc.set_field("int_handle", -1)


def test_unknown_field_raises_key_error():
    with pytest.raises(KeyError):
        HwDescriptor().get_field("no_such_field")
    with pytest.raises(KeyError):
        CompletionRecord().set_field("no_such_field", 1)


def test_parse_descriptor_roundtrip():
    desc = HwDescriptor(opcode=DsaOpcode.MEMFILL, pattern=0xAA55, dst_addr=0x2000, xfer_size=64)
    parsed = parse_descriptor(desc.to_bytes())
    assert parsed == desc
    assert parsed["pattern"] == 0xAA55


def test_parse_descriptor_wrong_length():
    with pytest.raises(ValueError):
        parse_descriptor(bytes(63))


def test_completion_record_accepts_32_bytes():
    raw = bytes([DsaCompletionStatus.SUCCESS]) + bytes(31)
    rec = parse_completion_record(raw)
    assert rec.get_field("status") == DsaCompletionStatus.SUCCESS
    assert len(rec.to_bytes()) == 64
    with pytest.raises(ValueError):
        parse_completion_record(bytes(40))


def test_completion_record_iax_fields():
    rec = CompletionRecord(iax_output_size=1234, iax_min=7, iax_population_cnt=99)
    assert rec.get_field("iax_first") == 7
    assert rec.get_field("iax_sum") == 99
    assert parse_completion_record(rec.to_bytes()).get_field("iax_output_size") == 1234


def test_completion_invalid_flags_bitfield():
    rec = CompletionRecord(invalid_flags=0xFFFFFF)
    assert rec.get_field("rsvd2") == 0
    rec.set_field("rsvd2", 0x12)
    assert rec.get_field("invalid_flags") == 0xFFFFFF


def test_completion_status_code_strips_write_bit():
    status = 0x80 | DsaCompletionStatus.PAGE_FAULT_NOBOF
    assert completion_status_code(status) == DsaCompletionStatus.PAGE_FAULT_NOBOF
    assert completion_status_code(IaxCompletionStatus.OUTBUF_OVERFLOW) == IaxCompletionStatus.OUTBUF_OVERFLOW


def test_decode_scmd_status():
    assert decode_scmd_status(0x80030000) == "IDXD_SCMD_WQ_NO_GRP"
    assert decode_scmd_status(0x80000010) == "IDXD_SCMD_DEV_ENABLED"
    with pytest.raises(ValueError):
        decode_scmd_status(0x00030000)
    with pytest.raises(ValueError):
        decode_scmd_status(0x80990000)


def test_win_param_roundtrip():
    param = WinParam(base=0x10000, size=0x2000, type=WinType.SA_MS,
                     flags=WinFlag.PROT_READ | WinFlag.PROT_WRITE, handle=3)
    data = param.to_bytes()
    assert len(data) == 24
    assert WinParam.from_bytes(data) == param


def test_win_param_rejects_unknown_flags():
    with pytest.raises(ValueError):
        WinParam(flags=0x10).to_bytes()


def test_win_attach_and_fault_roundtrip():
    attach = WinAttach(fd=5, handle=9)
    assert len(attach.to_bytes()) == 6
    assert WinAttach.from_bytes(attach.to_bytes()) == attach
    fault = WinFault(offset=0x40, len=0x1000, write_fault=1)
    assert len(fault.to_bytes()) == 20
    assert WinFault.from_bytes(fault.to_bytes()) == fault
    with pytest.raises(ValueError):
        WinFault.from_bytes(bytes(8))