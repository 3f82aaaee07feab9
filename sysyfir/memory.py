"""Memory instructions: address computation, loads, stores, stack slots and phis."""

from .instructions import Instruction
from .opcodes import OpID
from .types import PointerType
from .values import print_as_op


class GetElementPtrInst(Instruction):
    """Address of an element reached from ``ptr`` through ``idxs``."""

    def __init__(self, ptr, idxs, bb):
        idxs = list(idxs)
        element_type = self.compute_element_type(ptr, idxs)
        super().__init__(
            PointerType.get(element_type), OpID.getelementptr, 1 + len(idxs), bb
        )
        self.set_operand(0, ptr)
        for index, idx in enumerate(idxs, start=1):
            self.set_operand(index, idx)
        self.element_type = element_type

    @staticmethod
    def compute_element_type(ptr, idxs):
        """Type of the element addressed by ``ptr`` indexed with ``idxs``."""
        ty = ptr.type.pointer_element_type
        if ty.is_array_type():
            arr_ty = ty
            for _ in idxs[1:]:
                ty = arr_ty.element_type
                if ty.is_array_type():
                    arr_ty = ty
        return ty

    def print(self):
        base = self.get_operand(0)
        operands = ", ".join(
            f"{op.type.print()} {print_as_op(op)}" for op in self.operands
        )
        pointee = base.type.pointer_element_type.print()
        return f"{self.as_operand()} = {self.op_name} {pointee}, {operands}"


class StoreInst(Instruction):
    """Write ``value`` to the location ``ptr``."""

    def __init__(self, value, ptr, bb):
        super().__init__(bb.module.void_type, OpID.store, 2, bb)
        self.set_operand(0, value)
        self.set_operand(1, ptr)

    @property
    def rval(self):
        return self.get_operand(0)

    @property
    def lval(self):
        return self.get_operand(1)

    def print(self):
        value = self.get_operand(0)
        return (
            f"{self.op_name} {value.type.print()} {print_as_op(value)}, "
            f"{print_as_op(self.get_operand(1), True)}"
        )


class LoadInst(Instruction):
    """Read a value of ``type`` from the location ``ptr``."""

    def __init__(self, type, ptr, bb):
        super().__init__(type, OpID.load, 1, bb)
        self.set_operand(0, ptr)

    @property
    def lval(self):
        return self.get_operand(0)

    @property
    def load_type(self):
        return self.get_operand(0).type.pointer_element_type

    def print(self):
        ptr = self.get_operand(0)
        pointee = ptr.type.pointer_element_type.print()
        return f"{self.as_operand()} = {self.op_name} {pointee}, {print_as_op(ptr, True)}"


class AllocaInst(Instruction):
    """A stack slot holding a value of ``type``."""

    def __init__(self, type, bb):
        super().__init__(PointerType.get(type), OpID.alloca, 0, bb)
        self.alloca_type = type

    def print(self):
        return f"{self.as_operand()} = {self.op_name} {self.alloca_type.print()}"


class PhiInst(Instruction):
    """A phi node; it belongs to ``bb`` but is not placed in its instruction list."""

    def __init__(self, type, bb):
        super().__init__(type, OpID.phi, 0, None)
        self.parent = bb

    def add_incoming(self, value, pre_bb):
        """Take ``value`` when control arrives from ``pre_bb``."""
        self.add_operand(value)
        self.add_operand(pre_bb)

    @property
    def incoming(self):
        ops = self.operands
        return list(zip(ops[0::2], ops[1::2]))

    def print(self):
        pairs = self.incoming
        value_type = pairs[0][0].type if pairs else self.type
        entries = [
            f"[ {print_as_op(value)}, {print_as_op(block)} ]" for value, block in pairs
        ]
        preds = self.parent.pre_basic_blocks
        if len(pairs) < len(preds):
            known = [block for _, block in pairs]
            entries.extend(
                f"[ undef, {print_as_op(pre)} ]"
                for pre in preds
                if not any(pre is block for block in known)
            )
        return f"{self.as_operand()} = {self.op_name} {value_type.print()} " + ", ".join(
            entries
        )