"""Descriptor, completion record and window structures of the IDXD interface.

Every structure is packed little-endian. Descriptors and completion records
are 64-byte records whose fields overlap in unions; they are read and written
by field name, with aliases of a union sharing the same bytes.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar, Mapping

# Driver command error status
SCMD_DEV_ENABLED = 0x80000010
SCMD_DEV_NOT_ENABLED = 0x80000020
SCMD_WQ_ENABLED = 0x80000021
SCMD_DEV_DMA_ERR = 0x80020000
SCMD_WQ_NO_GRP = 0x80030000
SCMD_WQ_NO_NAME = 0x80040000
SCMD_WQ_NO_SVM = 0x80050000
SCMD_WQ_NO_THRESH = 0x80060000
SCMD_WQ_PORTAL_ERR = 0x80070000
SCMD_WQ_RES_ALLOC_ERR = 0x80080000
SCMD_PERCPU_ERR = 0x80090000
SCMD_DMA_CHAN_ERR = 0x800A0000
SCMD_CDEV_ERR = 0x800B0000
SCMD_WQ_NO_SWQ_SUPPORT = 0x800C0000
SCMD_WQ_NONE_CONFIGURED = 0x800D0000
SCMD_WQ_NO_SIZE = 0x800E0000
SCMD_WQ_NO_PRIV = 0x800F0000
SCMD_WQ_IRQ_ERR = 0x80100000
SCMD_WQ_NO_DRV_NAME = 0x80200000
SCMD_DEV_EVL_ERR = 0x80300000

SCMD_SOFTERR_MASK = 0x80000000
SCMD_SOFTERR_SHIFT = 16

_SCMD_NAMES = {
    SCMD_DEV_ENABLED: "IDXD_SCMD_DEV_ENABLED",
    SCMD_DEV_NOT_ENABLED: "IDXD_SCMD_DEV_NOT_ENABLED",
    SCMD_WQ_ENABLED: "IDXD_SCMD_WQ_ENABLED",
    SCMD_DEV_DMA_ERR: "IDXD_SCMD_DEV_DMA_ERR",
    SCMD_WQ_NO_GRP: "IDXD_SCMD_WQ_NO_GRP",
    SCMD_WQ_NO_NAME: "IDXD_SCMD_WQ_NO_NAME",
    SCMD_WQ_NO_SVM: "IDXD_SCMD_WQ_NO_SVM",
    SCMD_WQ_NO_THRESH: "IDXD_SCMD_WQ_NO_THRESH",
    SCMD_WQ_PORTAL_ERR: "IDXD_SCMD_WQ_PORTAL_ERR",
    SCMD_WQ_RES_ALLOC_ERR: "IDXD_SCMD_WQ_RES_ALLOC_ERR",
    SCMD_PERCPU_ERR: "IDXD_SCMD_PERCPU_ERR",
    SCMD_DMA_CHAN_ERR: "IDXD_SCMD_DMA_CHAN_ERR",
    SCMD_CDEV_ERR: "IDXD_SCMD_CDEV_ERR",
    SCMD_WQ_NO_SWQ_SUPPORT: "IDXD_SCMD_WQ_NO_SWQ_SUPPORT",
    SCMD_WQ_NONE_CONFIGURED: "IDXD_SCMD_WQ_NONE_CONFIGURED",
    SCMD_WQ_NO_SIZE: "IDXD_SCMD_WQ_NO_SIZE",
    SCMD_WQ_NO_PRIV: "IDXD_SCMD_WQ_NO_PRIV",
    SCMD_WQ_IRQ_ERR: "IDXD_SCMD_WQ_IRQ_ERR",
    SCMD_WQ_NO_DRV_NAME: "IDXD_SCMD_WQ_NO_DRV_NAME",
    SCMD_DEV_EVL_ERR: "IDXD_SCMD_DEV_EVL_ERR",
}

# Operation-specific flag words
COMPRESS_FLAG_EOB_BFINAL = 0x000C
COMPRESS_FLAG_FLUSH_OUTPUT = 0x0002

DECOMPRESS_FLAG_SELECT_EOB_BFINAL = 0x0010
DECOMPRESS_FLAG_CHECK_EOB = 0x0008
DECOMPRESS_FLAG_STOP_ON_EOB = 0x0004
DECOMPRESS_FLAG_FLUSH_OUTPUT = 0x0002
DECOMPRESS_FLAG_EN_DECOMPRESS = 0x0001

CRYPTO_CIPHER_FLAG_FLUSH_OUTPUT = 0x0002

COMP_STATUS_MASK = 0x7F
COMP_STATUS_WRITE = 0x80

COMP_FI_FA_MASKED_MASK = 0x1
COMP_FI_FA_MASKED_SHIFT = 0x0
COMP_FI_OP_ID_MASK = 0x7
COMP_FI_OP_ID_SHIFT = 0x1

DESCRIPTOR_SIZE = 64
COMPLETION_RECORD_SIZE = 64


class DsaOpcode(IntEnum):
    NOOP = 0
    BATCH = 1
    DRAIN = 2
    MEMMOVE = 3
    MEMFILL = 4
    COMPARE = 5
    COMPVAL = 6
    CR_DELTA = 7
    AP_DELTA = 8
    DUALCAST = 9
    TRANSL_FETCH = 10
    CRCGEN = 0x10
    COPY_CRC = 0x11
    DIF_CHECK = 0x12
    DIF_INS = 0x13
    DIF_STRP = 0x14
    DIF_UPDT = 0x15
    DIX_GEN = 0x17
    CFLUSH = 0x20
    UPDATE_WIN = 0x21
    RS_IPASID_MEMCOPY = 0x23
    RS_IPASID_FILL = 0x24
    RS_IPASID_COMPARE = 0x25
    RS_IPASID_COMPVAL = 0x26
    RS_IPASID_CFLUSH = 0x27
    URS_IPASID_MEMCOPY = 0x33
    URS_IPASID_FILL = 0x34
    URS_IPASID_COMPARE = 0x35
    URS_IPASID_COMPVAL = 0x36
    URS_IPASID_CFLUSH = 0x37


class IaxOpcode(IntEnum):
    NOOP = 0
    DRAIN = 2
    MEMMOVE = 3
    TRANSL_FETCH = 0x0A
    DECRYPT = 0x40
    ENCRYPT = 0x41
    DECOMPRESS = 0x42
    COMPRESS = 0x43
    CRC64 = 0x44
    ZDECOMPRESS32 = 0x48
    ZDECOMPRESS16 = 0x49
    ZDECOMPRESS8 = 0x4A
    ZCOMPRESS32 = 0x4C
    ZCOMPRESS16 = 0x4D
    ZCOMPRESS8 = 0x4E
    SCAN = 0x50
    SET_MEMBERSHIP = 0x51
    EXTRACT = 0x52
    SELECT = 0x53
    RLE_BURST = 0x54
    FIND_UNIQUE = 0x55
    EXPAND = 0x56


class DsaCompletionStatus(IntEnum):
    NONE = 0
    SUCCESS = 1
    SUCCESS_PRED = 2
    PAGE_FAULT_NOBOF = 3
    PAGE_FAULT_IR = 4
    BATCH_FAIL = 5
    BATCH_PAGE_FAULT = 6
    DR_OFFSET_NOINC = 7
    DR_OFFSET_ERANGE = 8
    DIF_ERR = 9
    BAD_OPCODE = 0x10
    INVALID_FLAGS = 0x11
    NOZERO_RESERVE = 0x12
    XFER_ERANGE = 0x13
    DESC_CNT_ERANGE = 0x14
    DR_ERANGE = 0x15
    OVERLAP_BUFFERS = 0x16
    DCAST_ERR = 0x17
    DESCLIST_ALIGN = 0x18
    INT_HANDLE_INVAL = 0x19
    CRA_XLAT = 0x1A
    CRA_ALIGN = 0x1B
    ADDR_ALIGN = 0x1C
    PRIV_BAD = 0x1D
    TRAFFIC_CLASS_CONF = 0x1E
    PFAULT_RDBA = 0x1F
    HW_ERR1 = 0x20
    HW_ERR_DRB = 0x21
    TRANSLATION_FAIL = 0x22


class IaxCompletionStatus(IntEnum):
    NONE = 0
    SUCCESS = 1
    PAGE_FAULT_IR = 0x04
    OUTBUF_OVERFLOW = 0x05
    BAD_OPCODE = 0x10
    INVALID_FLAGS = 0x11
    NOZERO_RESERVE = 0x12
    INVALID_SIZE = 0x13
    OVERLAP_BUFFERS = 0x16
    INT_HANDLE_INVAL = 0x19
    CRA_XLAT = 0x1A
    CRA_ALIGN = 0x1B
    ADDR_ALIGN = 0x1C
    PRIV_BAD = 0x1D
    TRAFFIC_CLASS_CONF = 0x1E
    PFAULT_RDBA = 0x1F
    HW_ERR1 = 0x20
    HW_ERR_DRB = 0x21
    TRANSLATION_FAIL = 0x22
    PRS_TIMEOUT = 0x23
    WATCHDOG = 0x24
    INVALID_COMP_FLAG = 0x30
    INVALID_FILTER_FLAG = 0x31
    INVALID_NUM_ELEMS = 0x33


class OpFlag(IntFlag):
    FENCE = 0x0001
    BOF = 0x0002
    CRAV = 0x0004
    RCR = 0x0008
    RCI = 0x0010
    CRSTS = 0x0020
    CR = 0x0080
    CC = 0x0100
    ADDR1_TCS = 0x0200
    ADDR2_TCS = 0x0400
    ADDR3_TCS = 0x0800
    CR_TCS = 0x1000
    STORD = 0x2000
    DRDBK = 0x4000
    DSTS = 0x8000
    RD_SRC2_AECS = 0x010000
    RD_SRC2_2ND = 0x020000
    WR_SRC2_CMPL = 0x040000


class WinType(IntEnum):
    SA_SS = 0
    SA_MS = 1


class WinFlag(IntFlag):
    PROT_READ = 0x0001
    PROT_WRITE = 0x0002
    WIN_CHECK = 0x0004
    OFFSET_MODE = 0x0008


WIN_FLAGS_MASK = (
    WinFlag.PROT_READ | WinFlag.PROT_WRITE | WinFlag.WIN_CHECK | WinFlag.OFFSET_MODE
)


def decode_scmd_status(status: int) -> str:
    """Return the symbolic name of a driver command error status."""
    if not status & SCMD_SOFTERR_MASK:
        raise ValueError(f"status {status:#x} is not a driver command error")
    try:
        return _SCMD_NAMES[status]
    except KeyError:
        raise ValueError(f"unknown driver command status {status:#x}") from None


def completion_status_code(status: int) -> int:
    """Return the status code of a completion record status byte."""
    return status & COMP_STATUS_MASK


@dataclass(frozen=True)
class _Field:
    offset: int
    size: int
    shift: int = 0
    bits: int | None = None
    raw: bool = False

    @property
    def width(self) -> int:
        return self.bits if self.bits is not None else self.size * 8


def _table(*entries: tuple[int, int, tuple[str, ...], dict]) -> dict[str, _Field]:
    table: dict[str, _Field] = {}
    for offset, size, names, extra in entries:
        for name in names:
            table[name] = _Field(offset, size, **extra)
    return table


def _f(offset: int, size: int, *names: str, **extra) -> tuple:
    return (offset, size, names, extra)


def _raw(offset: int, size: int, *names: str) -> tuple:
    return (offset, size, names, {"raw": True})


def _bits(offset: int, shift: int, bits: int, *names: str) -> tuple:
    return (offset, 4, names, {"shift": shift, "bits": bits})


_HW_FIELDS = _table(
    _bits(0, 0, 20, "pasid"),
    _bits(0, 20, 11, "rsvd"),
    _bits(0, 31, 1, "priv"),
    _bits(4, 0, 24, "flags"),
    _bits(4, 24, 8, "opcode"),
    _f(8, 8, "completion_addr"),
    _f(16, 8, "src_addr", "rdback_addr", "pattern", "desc_list_addr",
       "win_base_addr", "transl_fetch_addr"),
    _f(24, 8, "dst_addr", "rdback_addr2", "src2_addr", "comp_pattern", "win_size"),
    _f(32, 4, "xfer_size", "desc_count", "region_size"),
    _f(36, 2, "int_handle"),
    _f(38, 2, "rsvd1", "iax_compr_flags", "iax_decompr_flags",
       "iax_crc64_flags", "iax_cipher_flags"),
    # create delta record
    _f(40, 1, "expected_res"),
    _f(40, 8, "delta_addr"),
    _f(48, 4, "max_delta_size"),
    _f(52, 4, "delt_rsvd"),
    _f(56, 1, "expected_res_mask"),
    _f(40, 4, "delta_rec_size"),
    _f(40, 8, "dest2"),
    # CRC
    _f(40, 4, "crc_seed"),
    _f(44, 4, "crc_rsvd"),
    _f(48, 8, "seed_addr"),
    # DIF check or strip
    _f(40, 1, "src_dif_flags"),
    _f(41, 1, "dif_chk_res"),
    _f(42, 1, "dif_chk_flags"),
    _raw(43, 5, "dif_chk_res2"),
    _f(48, 4, "chk_ref_tag_seed"),
    _f(52, 2, "chk_app_tag_mask"),
    _f(54, 2, "chk_app_tag_seed"),
    # DIF insert
    _f(40, 1, "dif_ins_res"),
    _f(41, 1, "dest_dif_flag"),
    _f(42, 1, "dif_ins_flags"),
    _raw(43, 13, "dif_ins_res2"),
    _f(56, 4, "ins_ref_tag_seed"),
    _f(60, 2, "ins_app_tag_mask"),
    _f(62, 2, "ins_app_tag_seed"),
    # DIF update
    _f(40, 1, "src_upd_flags"),
    _f(41, 1, "upd_dest_flags"),
    _f(42, 1, "dif_upd_flags"),
    _raw(43, 5, "dif_upd_res"),
    _f(48, 4, "src_ref_tag_seed"),
    _f(52, 2, "src_app_tag_mask"),
    _f(54, 2, "src_app_tag_seed"),
    _f(56, 4, "dest_ref_tag_seed"),
    _f(60, 2, "dest_app_tag_mask"),
    _f(62, 2, "dest_app_tag_seed"),
    # IAX common
    _f(40, 8, "iax_src2_addr"),
    _f(48, 4, "iax_max_dst_size"),
    _f(52, 4, "iax_src2_xfer_size"),
    _f(56, 4, "iax_filter_flags"),
    _f(60, 4, "iax_num_inputs"),
    # CRC64
    _f(40, 8, "iax_crc64_rsvd"),
    _f(48, 8, "iax_crc64_rsvd2"),
    _f(56, 8, "iax_crc64_poly"),
    # translation fetch
    _f(40, 8, "transl_fetch_rsvd"),
    _f(48, 4, "transl_fetch_region_stride"),
    _f(52, 4, "transl_fetch_rsvd2"),
    _f(56, 8, "transl_fetch_rsvd3"),
    # restricted ops with inter-PASID
    _raw(40, 20, "rest_ip_res1"),
    _f(60, 2, "src_pasid_hndl", "src1_pasid_hndl"),
    _raw(60, 2, "rest_ip_res2"),
    _f(62, 2, "dest_pasid_hndl", "src2_pasid_hndl"),
    _raw(62, 2, "rest_ip_res3"),
    # unrestricted ops with inter-PASID
    _raw(40, 8, "unrest_ip_res1"),
    _bits(48, 0, 20, "addr1_pasid", "src_pasid", "src1_pasid"),
    _bits(48, 20, 11, "unrest_ip_res2", "unrest_ip_res3", "unrest_ip_res5"),
    _bits(48, 31, 1, "addr1_priv", "unrest_src_priv", "unrest_src1_priv"),
    _bits(48, 0, 32, "unrest_ip_res4"),
    _bits(52, 0, 20, "addr2_pasid", "dest_pasid", "src2_pasid"),
    _bits(52, 20, 11, "unrest_ip_res6", "unrest_ip_res7", "unrest_ip_res8"),
    _bits(52, 31, 1, "addr2_priv", "unrest_dest_priv", "unrest_src2_priv"),
    _bits(52, 0, 32, "unrest_ip_res9"),
    _f(56, 6, "unrest_ip_res10"),
    _f(62, 2, "ipt_handle"),
    # update window
    _raw(40, 21, "update_win_resv2"),
    _f(61, 1, "idpt_win_flags"),
    _f(62, 2, "idpt_win_handle"),
    # translation fetch
    _f(40, 8, "transl_fetch_res"),
    _f(48, 4, "region_stride"),
    # DIX generate
    _f(40, 1, "dix_gen_res"),
    _f(41, 1, "dest_dif_flags"),
    _f(42, 1, "dif_flags"),
    _raw(43, 13, "dix_gen_res2"),
    _f(56, 4, "ref_tag_seed"),
    _f(60, 2, "app_tag_mask"),
    _f(62, 2, "app_tag_seed"),
    _raw(40, 24, "op_specific"),
)

_COMPLETION_FIELDS = _table(
    _f(0, 1, "status"),
    _f(1, 1, "result", "dif_status"),
    _f(2, 2, "rsvd"),
    _f(4, 4, "bytes_completed", "descs_completed"),
    _f(8, 8, "fault_addr"),
    # common record
    _bits(16, 0, 24, "invalid_flags"),
    _bits(16, 24, 8, "rsvd2"),
    _f(16, 4, "delta_rec_size", "crc_val"),
    # DIF check and strip
    _f(16, 4, "dif_chk_ref_tag"),
    _f(20, 2, "dif_chk_app_tag_mask"),
    _f(22, 2, "dif_chk_app_tag"),
    # DIF insert
    _f(16, 8, "dif_ins_res"),
    _f(24, 4, "dif_ins_ref_tag"),
    _f(28, 2, "dif_ins_app_tag_mask"),
    _f(30, 2, "dif_ins_app_tag"),
    # DIF update
    _f(16, 4, "dif_upd_src_ref_tag"),
    _f(20, 2, "dif_upd_src_app_tag_mask"),
    _f(22, 2, "dif_upd_src_app_tag"),
    _f(24, 4, "dif_upd_dest_ref_tag"),
    _f(28, 2, "dif_upd_dest_app_tag_mask"),
    _f(30, 2, "dif_upd_dest_app_tag"),
    # DIX generate
    _f(16, 8, "dix_gen_res"),
    _f(24, 4, "dix_ref_tag"),
    _f(28, 2, "dix_app_tag_mask"),
    _f(30, 2, "dix_app_tag"),
    # IAX common
    _f(16, 4, "iax_invalid_flags"),
    _f(20, 4, "iax_rsvd"),
    _f(24, 4, "iax_output_size"),
    _f(28, 1, "iax_output_bits"),
    _f(29, 1, "iax_rsvd2"),
    _f(30, 2, "iax_xor_chksum"),
    _f(32, 4, "iax_crc"),
    _f(36, 4, "iax_min", "iax_first"),
    _f(40, 4, "iax_max", "iax_last"),
    _f(44, 4, "iax_sum", "iax_population_cnt"),
    # CRC64
    _f(16, 4, "crc64_invalid_flags"),
    _f(20, 4, "crc64_rsvd"),
    _f(24, 8, "crc64_rsvd2"),
    _f(32, 8, "crc64_rsvd3"),
    _f(40, 8, "crc64_result"),
    _raw(16, 48, "op_specific"),
)


class _Record:
    """A fixed-size packed record addressed by field name."""

    _SIZE: ClassVar[int] = 64
    _FIELDS: ClassVar[Mapping[str, _Field]] = {}
    _ACCEPTED_SIZES: ClassVar[tuple[int, ...]] = (64,)

    def __init__(self, data: bytes | bytearray | None = None, **fields: int | bytes):
        self._buf = bytearray(self._SIZE)
        if data is not None:
            if len(data) not in self._ACCEPTED_SIZES:
                raise ValueError(
                    f"{type(self).__name__} needs {' or '.join(map(str, self._ACCEPTED_SIZES))}"
                    f" bytes, got {len(data)}"
                )
            self._buf[: len(data)] = data
        for name, value in fields.items():
            self.set_field(name, value)

    @classmethod
    def _spec(cls, name: str) -> _Field:
        try:
            return cls._FIELDS[name]
        except KeyError:
            raise KeyError(f"{cls.__name__} has no field {name!r}") from None

    def _get(self, name: str) -> int | bytes:
        spec = self._spec(name)
        chunk = self._buf[spec.offset : spec.offset + spec.size]
        if spec.raw:
            return bytes(chunk)
        value = int.from_bytes(chunk, "little")
        if spec.bits is not None:
            value = (value >> spec.shift) & ((1 << spec.bits) - 1)
        return value

    def _set(self, name: str, value: int | bytes) -> None:
        spec = self._spec(name)
        end = spec.offset + spec.size
        if spec.raw:
            data = bytes(value)
            if len(data) != spec.size:
                raise ValueError(f"field {name!r} holds {spec.size} bytes, got {len(data)}")
            self._buf[spec.offset : end] = data
            return
        value = int(value)
        if not 0 <= value < (1 << spec.width):
            raise ValueError(f"value {value:#x} does not fit in {spec.width}-bit field {name!r}")
        if spec.bits is not None:
            mask = ((1 << spec.bits) - 1) << spec.shift
            word = int.from_bytes(self._buf[spec.offset : end], "little")
            value = (word & ~mask) | (value << spec.shift)
        self._buf[spec.offset : end] = value.to_bytes(spec.size, "little")

    def get_field(self, name: str) -> int | bytes:
        """Return the value of a field; byte-array fields come back as bytes."""
        return self._get(name)

    def set_field(self, name: str, value: int | bytes) -> None:
        """Store a value in a field, sharing bytes with its union aliases."""
        self._set(name, value)

    def to_bytes(self) -> bytes:
        """Return the packed record."""
        return bytes(self._buf)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __getitem__(self, name: str) -> int | bytes:
        return self.get_field(name)

    def __setitem__(self, name: str, value: int | bytes) -> None:
        self.set_field(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._buf == other._buf

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_bytes().hex()})"


class HwDescriptor(_Record):
    """A 64-byte work descriptor."""

    _SIZE = DESCRIPTOR_SIZE
    _FIELDS = _HW_FIELDS
    _ACCEPTED_SIZES = (DESCRIPTOR_SIZE,)

    def to_bytes(self) -> bytes:
        """Return the packed 64-byte descriptor."""
        return bytes(self._buf)

    def set_field(self, name: str, value: int | bytes) -> None:
        """Store a value in a descriptor field, sharing bytes with its aliases."""
        self._set(name, value)

    def get_field(self, name: str) -> int | bytes:
        """Return the value of a descriptor field."""
        return self._get(name)


class CompletionRecord(_Record):
    """A completion record; 64 bytes, of which DSA devices may write 32."""

    _SIZE = COMPLETION_RECORD_SIZE
    _FIELDS = _COMPLETION_FIELDS
    _ACCEPTED_SIZES = (32, COMPLETION_RECORD_SIZE)

    def to_bytes(self) -> bytes:
        """Return the packed 64-byte completion record."""
        return bytes(self._buf)

    def set_field(self, name: str, value: int | bytes) -> None:
        """Store a value in a completion record field, sharing bytes with its aliases."""
        self._set(name, value)

    def get_field(self, name: str) -> int | bytes:
        """Return the value of a completion record field."""
        return self._get(name)


def parse_descriptor(data: bytes | bytearray) -> HwDescriptor:
    """Build a descriptor from its 64 packed bytes."""
    return HwDescriptor(data)


def parse_completion_record(data: bytes | bytearray) -> CompletionRecord:
    """Build a completion record from 32 or 64 packed bytes."""
    return CompletionRecord(data)


class _Packed:
    _FORMAT: ClassVar[struct.Struct]

    def to_bytes(self) -> bytes:
        return self._FORMAT.pack(*self._values())

    @classmethod
    def from_bytes(cls, data: bytes | bytearray):
        if len(data) != cls._FORMAT.size:
            raise ValueError(f"{cls.__name__} needs {cls._FORMAT.size} bytes, got {len(data)}")
        return cls(*cls._FORMAT.unpack(data))

    def _values(self) -> tuple:
        raise NotImplementedError


@dataclass
class WinParam(_Packed):
    """Window creation parameters."""

    base: int = 0
    size: int = 0
    type: int = WinType.SA_SS
    flags: int = 0
    handle: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<QQIHH")

    def _values(self) -> tuple:
        return (self.base, self.size, int(self.type), int(self.flags), self.handle)

    def to_bytes(self) -> bytes:
        """Return the packed 24-byte structure."""
        if int(self.flags) & ~int(WIN_FLAGS_MASK):
            raise ValueError(f"unknown window flags {int(self.flags):#x}")
        return super().to_bytes()


@dataclass
class WinAttach(_Packed):
    """Window attach parameters."""

    fd: int = 0
    handle: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<IH")

    def _values(self) -> tuple:
        return (self.fd, self.handle)

    def to_bytes(self) -> bytes:
        """Return the packed 6-byte structure."""
        return super().to_bytes()


@dataclass
class WinFault(_Packed):
    """A window fault report."""

    offset: int = 0
    len: int = 0
    write_fault: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<QQI")

    def _values(self) -> tuple:
        return (self.offset, self.len, self.write_fault)

    def to_bytes(self) -> bytes:
        """Return the packed 20-byte structure."""
        return super().to_bytes()


_IOC_WRITE = 1
_IOC_READ = 2


def _ioc(direction: int, type_: int, nr: int, size: int) -> int:
    return (direction << 30) | (size << 16) | (type_ << 8) | nr


IDXD_TYPE = ord("d")
IDXD_IOC_BASE = 100
IDXD_WIN_BASE = 200

IDXD_WIN_CREATE = _ioc(_IOC_READ | _IOC_WRITE, IDXD_TYPE, IDXD_IOC_BASE + 1, WinParam._FORMAT.size)
IDXD_WIN_ATTACH = _ioc(_IOC_READ, IDXD_TYPE, IDXD_IOC_BASE + 2, WinAttach._FORMAT.size)
IDXD_WIN_FAULT = _ioc(_IOC_READ, IDXD_TYPE, IDXD_WIN_BASE + 1, WinFault._FORMAT.size)