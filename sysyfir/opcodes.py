"""Instruction opcodes and comparison predicates."""

from enum import Enum, IntEnum, auto


class OpID(IntEnum):
    """Instruction kinds; the declaration order is the ordering used by passes."""

    ret = auto()
    br = auto()
    add = auto()
    sub = auto()
    mul = auto()
    sdiv = auto()
    srem = auto()
    fadd = auto()
    fsub = auto()
    fmul = auto()
    fdiv = auto()
    alloca = auto()
    load = auto()
    store = auto()
    cmp = auto()
    fcmp = auto()
    phi = auto()
    call = auto()
    getelementptr = auto()
    zext = auto()
    fptosi = auto()
    sitofp = auto()


class CmpOp(Enum):
    """Comparison predicates shared by integer and float compares."""

    EQ = auto()
    NE = auto()
    GT = auto()
    GE = auto()
    LT = auto()
    LE = auto()


_ICMP_NAMES = {
    CmpOp.GE: "sge",
    CmpOp.GT: "sgt",
    CmpOp.LE: "sle",
    CmpOp.LT: "slt",
    CmpOp.EQ: "eq",
    CmpOp.NE: "ne",
}

_FCMP_NAMES = {
    CmpOp.GE: "uge",
    CmpOp.GT: "ugt",
    CmpOp.LE: "ule",
    CmpOp.LT: "ult",
    CmpOp.EQ: "ueq",
    CmpOp.NE: "une",
}


def print_cmp_type(op):
    """Return the integer-compare predicate text for ``op``."""
    return _ICMP_NAMES.get(op, "wrong cmpop")


def print_fcmp_type(op):
    """Return the float-compare predicate text for ``op``."""
    return _FCMP_NAMES.get(op, "wrong fcmpop")