"""Conversion instructions between integer widths and between int and float."""

from .instructions import Instruction
from .opcodes import OpID
from .values import print_as_op


class _CastInst(Instruction):
    op_id_value = None

    def __init__(self, value, dest_type, bb):
        super().__init__(dest_type, self.op_id_value, 1, bb)
        self.dest_type = dest_type
        self.set_operand(0, value)

    def print(self):
        value = self.get_operand(0)
        return (
            f"{self.as_operand()} = {self.op_name} {value.type.print()} "
            f"{print_as_op(value)} to {self.dest_type.print()}"
        )


class ZextInst(_CastInst):
    """Zero-extend an integer to a wider integer type."""

    op_id_value = OpID.zext

    def __init__(self, value, dest_type, bb):
        super().__init__(value, dest_type, bb)

    def print(self):
        return super().print()


class FpToSiInst(_CastInst):
    """Convert a float to a signed integer."""

    op_id_value = OpID.fptosi

    def __init__(self, value, dest_type, bb):
        super().__init__(value, dest_type, bb)

    def print(self):
        return super().print()


class SiToFpInst(_CastInst):
    """Convert a signed integer to a float."""

    op_id_value = OpID.sitofp

    def __init__(self, value, dest_type, bb):
        super().__init__(value, dest_type, bb)

    def print(self):
        return super().print()