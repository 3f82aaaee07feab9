"""Integer, float, array and zero constants."""

import math
import struct
from abc import ABC, abstractmethod

from .values import User


def _to_int32(value):
    return (int(value) + 2**31) % 2**32 - 2**31


def _to_float32(value):
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Constant(User, ABC):
    """A constant value registered with its module."""

    def __init__(self, type, module, num_ops=0):
        super().__init__(type, "", num_ops)
        self.module = module
        module.add_constant(self)

    def as_operand(self):
        return self.print()

    @abstractmethod
    def print(self):
        """Return the textual form of the constant."""


class ConstantInt(Constant):
    def __init__(self, value, module):
        super().__init__(module.int32_type, module)
        self.value = _to_int32(value)

    @classmethod
    def from_bool(cls, value, module):
        """An ``i1`` constant holding 1 or 0."""
        constant = cls.__new__(cls)
        Constant.__init__(constant, module.int1_type, module)
        constant.value = 1 if value else 0
        return constant

    def print(self):
        if self.type.is_integer_type() and self.type.num_bits == 1:
            return "false" if self.value == 0 else "true"
        return str(self.value)


class ConstantFloat(Constant):
    def __init__(self, value, module):
        super().__init__(module.float_type, module)
        self.value = _to_float32(float(value))

    def print(self):
        bits = struct.unpack("<Q", struct.pack("<d", self.value))[0]
        return f"0x{bits:x}"


class ConstantArray(Constant):
    def __init__(self, type, values, module):
        values = list(values)
        super().__init__(type, module, len(values))
        for index, value in enumerate(values):
            self.set_operand(index, value)
        self.elements = values

    def element_value(self, index):
        return self.elements[index]

    def print(self):
        element_type = self.type.array_element_type.print()
        items = ", ".join(
            f"{element_type} {self.element_value(i).print()}"
            for i in range(max(self.type.num_elements, 1))
        )
        return f"[{items}]"


class ConstantZero(Constant):
    def __init__(self, type, module):
        super().__init__(type, module)

    def print(self):
        return "zeroinitializer"