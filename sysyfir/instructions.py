"""Arithmetic, comparison, call, branch and return instructions."""

from .opcodes import OpID, print_cmp_type, print_fcmp_type
from .types import is_eq_type
from .values import User, print_as_op

_BINARY_OPS = frozenset(
    {
        OpID.add,
        OpID.sub,
        OpID.mul,
        OpID.sdiv,
        OpID.srem,
        OpID.fadd,
        OpID.fsub,
        OpID.fmul,
        OpID.fdiv,
    }
)


class Instruction(User):
    """An instruction, appended to ``parent`` when one is given."""

    def __init__(self, type, op_id, num_ops, parent):
        super().__init__(type, "", num_ops)
        self.op_id = op_id
        self.parent = parent
        if parent is not None:
            parent.add_instruction(self)

    @property
    def function(self):
        return self.parent.parent

    @property
    def module(self):
        return self.parent.module

    @property
    def op_name(self):
        return self.module.instr_op_name(self.op_id)

    def is_void(self):
        """Whether the instruction produces no value."""
        if self.op_id in (OpID.ret, OpID.br, OpID.store):
            return True
        return self.op_id is OpID.call and self.type.is_void_type()

    def is_binary(self):
        return self.op_id in _BINARY_OPS

    def is_gep(self):
        return self.op_id is OpID.getelementptr

    def _two_operands(self):
        lhs, rhs = self.get_operand(0), self.get_operand(1)
        rhs_text = print_as_op(rhs, not is_eq_type(lhs.type, rhs.type))
        return f"{lhs.type.print()} {print_as_op(lhs)}, {rhs_text}"


class BinaryInst(Instruction):
    """A two-operand arithmetic instruction."""

    def __init__(self, type, op_id, lhs, rhs, bb):
        super().__init__(type, op_id, 2, bb)
        self.set_operand(0, lhs)
        self.set_operand(1, rhs)

    @classmethod
    def create_add(cls, lhs, rhs, bb, module):
        ty = lhs.type if lhs.type.is_pointer_type() else rhs.type
        return cls(ty, OpID.add, lhs, rhs, bb)

    @classmethod
    def create_sub(cls, lhs, rhs, bb, module):
        return cls(module.int32_type, OpID.sub, lhs, rhs, bb)

    @classmethod
    def create_mul(cls, lhs, rhs, bb, module):
        return cls(module.int32_type, OpID.mul, lhs, rhs, bb)

    @classmethod
    def create_sdiv(cls, lhs, rhs, bb, module):
        return cls(module.int32_type, OpID.sdiv, lhs, rhs, bb)

    @classmethod
    def create_srem(cls, lhs, rhs, bb, module):
        return cls(module.int32_type, OpID.srem, lhs, rhs, bb)

    @classmethod
    def create_fadd(cls, lhs, rhs, bb, module):
        return cls(module.float_type, OpID.fadd, lhs, rhs, bb)

    @classmethod
    def create_fsub(cls, lhs, rhs, bb, module):
        return cls(module.float_type, OpID.fsub, lhs, rhs, bb)

    @classmethod
    def create_fmul(cls, lhs, rhs, bb, module):
        return cls(module.float_type, OpID.fmul, lhs, rhs, bb)

    @classmethod
    def create_fdiv(cls, lhs, rhs, bb, module):
        return cls(module.float_type, OpID.fdiv, lhs, rhs, bb)

    def print(self):
        return f"{self.as_operand()} = {self.op_name} {self._two_operands()}"


class CmpInst(Instruction):
    """An integer comparison yielding ``i1``."""

    def __init__(self, op, lhs, rhs, bb, module):
        super().__init__(module.int1_type, OpID.cmp, 2, bb)
        self.cmp_op = op
        self.set_operand(0, lhs)
        self.set_operand(1, rhs)

    def print(self):
        predicate = print_cmp_type(self.cmp_op)
        return f"{self.as_operand()} = {self.op_name} {predicate} {self._two_operands()}"


class FCmpInst(Instruction):
    """A float comparison yielding ``i1``."""

    def __init__(self, op, lhs, rhs, bb, module):
        super().__init__(module.int1_type, OpID.fcmp, 2, bb)
        self.cmp_op = op
        self.set_operand(0, lhs)
        self.set_operand(1, rhs)

    def print(self):
        predicate = print_fcmp_type(self.cmp_op)
        return f"{self.as_operand()} = {self.op_name} {predicate} {self._two_operands()}"


class CallInst(Instruction):
    """A call; operand 0 is the callee, the rest are the arguments."""

    def __init__(self, func, args, bb):
        args = list(args)
        super().__init__(func.return_type, OpID.call, len(args) + 1, bb)
        self.set_operand(0, func)
        for index, arg in enumerate(args, start=1):
            self.set_operand(index, arg)

    @property
    def function_type(self):
        return self.get_operand(0).type

    def print(self):
        prefix = "" if self.is_void() else f"{self.as_operand()} = "
        args = ", ".join(
            f"{arg.type.print()} {print_as_op(arg)}" for arg in self.operands[1:]
        )
        ret = self.function_type.return_type.print()
        return f"{prefix}{self.op_name} {ret} {print_as_op(self.get_operand(0))}({args})"


class BranchInst(Instruction):
    """A conditional or unconditional branch."""

    def __init__(self, operands, bb):
        operands = list(operands)
        super().__init__(bb.module.void_type, OpID.br, len(operands), bb)
        for index, operand in enumerate(operands):
            self.set_operand(index, operand)

    @classmethod
    def create_cond_br(cls, cond, if_true, if_false, bb):
        if_true.add_pre_basic_block(bb)
        if_false.add_pre_basic_block(bb)
        bb.add_succ_basic_block(if_false)
        bb.add_succ_basic_block(if_true)
        return cls([cond, if_true, if_false], bb)

    @classmethod
    def create_br(cls, if_true, bb):
        if_true.add_pre_basic_block(bb)
        bb.add_succ_basic_block(if_true)
        return cls([if_true], bb)

    def is_cond_br(self):
        return self.num_operands == 3

    def print(self):
        return f"{self.op_name} " + ", ".join(
            print_as_op(operand, True) for operand in self.operands
        )


class ReturnInst(Instruction):
    """A return, with or without a value."""

    def __init__(self, value, bb):
        super().__init__(bb.module.void_type, OpID.ret, 0 if value is None else 1, bb)
        if value is not None:
            self.set_operand(0, value)

    @classmethod
    def create_ret(cls, value, bb):
        return cls(value, bb)

    @classmethod
    def create_void_ret(cls, bb):
        return cls(None, bb)

    def is_void_ret(self):
        return self.num_operands == 0

    def print(self):
        if self.is_void_ret():
            return f"{self.op_name} void"
        value = self.get_operand(0)
        return f"{self.op_name} {value.type.print()} {print_as_op(value)}"