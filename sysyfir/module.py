"""The module: owner of types, constants, globals and functions."""

from .opcodes import OpID
from .types import ArrayType, FloatType, IntegerType, PointerType, Type, TypeID

_OP_NAMES = {
    OpID.ret: "ret",
    OpID.br: "br",
    OpID.add: "add",
    OpID.sub: "sub",
    OpID.mul: "mul",
    OpID.sdiv: "sdiv",
    OpID.srem: "srem",
    OpID.fadd: "fadd",
    OpID.fsub: "fsub",
    OpID.fmul: "fmul",
    OpID.fdiv: "fdiv",
    OpID.alloca: "alloca",
    OpID.load: "load",
    OpID.store: "store",
    OpID.cmp: "icmp",
    OpID.fcmp: "fcmp",
    OpID.phi: "phi",
    OpID.call: "call",
    OpID.getelementptr: "getelementptr",
    OpID.zext: "zext",
    OpID.fptosi: "fptosi",
    OpID.sitofp: "sitofp",
}


class Module:
    """A compilation unit holding uniqued types and top-level definitions."""

    def __init__(self, name=""):
        self.name = name
        self.file_name = ""
        self.types = []
        self.constants = []
        self.functions = []
        self.global_variables = []
        self._pointer_types = {}
        self._array_types = {}
        self._void = Type(TypeID.VOID, self)
        self._label = Type(TypeID.LABEL, self)
        self._int1 = IntegerType(1, self)
        self._int32 = IntegerType(32, self)
        self._float32 = FloatType(self)

    @property
    def void_type(self):
        return self._void

    @property
    def label_type(self):
        return self._label

    @property
    def int1_type(self):
        return self._int1

    @property
    def int32_type(self):
        return self._int32

    @property
    def float_type(self):
        return self._float32

    def pointer_type(self, contained):
        if contained not in self._pointer_types:
            self._pointer_types[contained] = PointerType(contained, self)
        return self._pointer_types[contained]

    def array_type(self, contained, num_elements):
        key = (contained, num_elements)
        if key not in self._array_types:
            self._array_types[key] = ArrayType(contained, num_elements, self)
        return self._array_types[key]

    @property
    def int32_ptr_type(self):
        return self.pointer_type(self._int32)

    @property
    def float_ptr_type(self):
        return self.pointer_type(self._float32)

    def add_type(self, ty):
        self.types.append(ty)

    def add_constant(self, constant):
        self.constants.append(constant)

    def add_function(self, function):
        self.functions.append(function)

    def add_global_variable(self, variable):
        self.global_variables.append(variable)

    def instr_op_name(self, op):
        return _OP_NAMES[op]

    def set_file_name(self, name):
        self.file_name = name

    def set_print_name(self):
        """Give every unnamed argument, block and instruction a name."""
        for function in self.functions:
            function.set_instr_name()

    def print(self):
        parts = [f"{g.print()}\n" for g in self.global_variables]
        parts.extend(f"{f.print()}\n" for f in self.functions)
        return "".join(parts)