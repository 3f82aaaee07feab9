"""IR types: void, label, integers, float, functions, arrays and pointers."""

from enum import Enum, auto


class TypeID(Enum):
    VOID = auto()
    LABEL = auto()
    INTEGER = auto()
    FUNCTION = auto()
    ARRAY = auto()
    POINTER = auto()
    FLOAT = auto()


def is_eq_type(ty1, ty2):
    """Types are unique per module, so equality is identity."""
    return ty1 is ty2


class Type:
    """A type owned by a module; instances are compared by identity."""

    def __init__(self, tid, module):
        self.tid = tid
        self.module = module
        module.add_type(self)

    def is_void_type(self):
        return self.tid is TypeID.VOID

    def is_label_type(self):
        return self.tid is TypeID.LABEL

    def is_integer_type(self):
        return self.tid is TypeID.INTEGER

    def is_float_type(self):
        return self.tid is TypeID.FLOAT

    def is_function_type(self):
        return self.tid is TypeID.FUNCTION

    def is_array_type(self):
        return self.tid is TypeID.ARRAY

    def is_pointer_type(self):
        return self.tid is TypeID.POINTER

    @property
    def pointer_element_type(self):
        """The pointee type, or None when this is not a pointer."""
        if isinstance(self, PointerType):
            return self.element_type
        return None

    @property
    def array_element_type(self):
        """The element type, or None when this is not an array."""
        if isinstance(self, ArrayType):
            return self.element_type
        return None

    @property
    def size(self):
        """Size in bytes as laid out by the backend."""
        if isinstance(self, IntegerType):
            return max(self.num_bits // 8, 1)
        if self.is_float_type():
            return 4
        if isinstance(self, ArrayType):
            return self.element_type.size * self.num_elements
        if isinstance(self, PointerType):
            if self.element_type.is_array_type():
                return self.element_type.size
            return 4
        return 0

    def print(self):
        if self.tid is TypeID.VOID:
            return "void"
        if self.tid is TypeID.LABEL:
            return "label"
        if self.tid is TypeID.FLOAT:
            return "float"
        return ""

    def __str__(self):
        return self.print()

    def __repr__(self):
        return f"<{type(self).__name__} {self.print()}>"


class IntegerType(Type):
    def __init__(self, num_bits, module):
        self.num_bits = num_bits
        super().__init__(TypeID.INTEGER, module)

    def print(self):
        return f"i{self.num_bits}"


class FloatType(Type):
    def __init__(self, module):
        super().__init__(TypeID.FLOAT, module)


class FunctionType(Type):
    def __init__(self, result, params, module):
        self.return_type = result
        self.params = tuple(params)
        super().__init__(TypeID.FUNCTION, module)

    def param_type(self, index):
        return self.params[index]

    @property
    def num_of_args(self):
        return len(self.params)

    @staticmethod
    def is_valid_return_type(ty):
        return ty.is_integer_type() or ty.is_void_type()

    @staticmethod
    def is_valid_argument_type(ty):
        return ty.is_integer_type() or ty.is_pointer_type()

    def print(self):
        params = ", ".join(p.print() for p in self.params)
        return f"{self.return_type.print()} ({params})"


class ArrayType(Type):
    def __init__(self, contained, num_elements, module):
        self.element_type = contained
        self.num_elements = num_elements
        super().__init__(TypeID.ARRAY, module)

    @classmethod
    def get(cls, contained, num_elements):
        """Return the module's unique array type of ``num_elements`` ``contained``."""
        return contained.module.array_type(contained, num_elements)

    @staticmethod
    def is_valid_element_type(ty):
        return ty.is_integer_type() or ty.is_array_type() or ty.is_float_type()

    def print(self):
        return f"[{self.num_elements} x {self.element_type.print()}]"


class PointerType(Type):
    def __init__(self, contained, module):
        self.element_type = contained
        super().__init__(TypeID.POINTER, module)

    @classmethod
    def get(cls, contained):
        """Return the module's unique pointer type to ``contained``."""
        return contained.module.pointer_type(contained)

    def print(self):
        return f"{self.element_type.print()}*"