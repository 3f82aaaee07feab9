import pytest

from sysyfir.module import Module
from sysyfir.types import ArrayType, FunctionType, PointerType, TypeID, is_eq_type


@pytest.fixture
def module():
    return Module("m")


def test_basic_type_text(module):
    assert module.int32_type.print() == "i32"
    assert module.int1_type.print() == "i1"
    assert module.void_type.print() == "void"
    assert module.label_type.print() == "label"
    assert module.float_type.print() == "float"


def test_type_predicates(module):
    assert module.int32_type.is_integer_type()
    assert not module.int32_type.is_float_type()
    assert module.float_type.is_float_type()
    assert module.void_type.is_void_type()
    assert module.label_type.is_label_type()
    assert module.int32_type.tid is TypeID.INTEGER


def test_pointer_type_is_unique(module):
    i32 = module.int32_type
    ptr = PointerType.get(i32)
    assert PointerType.get(i32) is ptr
    assert ptr.is_pointer_type()
    assert ptr.pointer_element_type is i32
    assert ptr.print().endswith("*")
    assert ptr.print().startswith(i32.print())


def test_array_type_is_unique_per_length(module):
    i32 = module.int32_type
    arr = ArrayType.get(i32, 3)
    assert ArrayType.get(i32, 3) is arr
    assert ArrayType.get(i32, 4) is not arr
    assert arr.array_element_type is i32
    assert arr.num_elements == 3
    assert arr.print() == "[3 x i32]"


def test_element_types_none_for_scalars(module):
    assert module.int32_type.pointer_element_type is None
    assert module.int32_type.array_element_type is None


def test_sizes(module):
    i32 = module.int32_type
    arr = ArrayType.get(i32, 5)
    assert module.int1_type.size == 1
    assert module.float_type.size == i32.size
    assert arr.size == 5 * i32.size
    assert PointerType.get(arr).size == arr.size
    assert PointerType.get(i32).size == i32.size
    assert module.void_type.size == 0


def test_function_type(module):
    i32 = module.int32_type
    fptr = module.float_ptr_type
    fty = FunctionType(i32, [i32, fptr], module)
    assert fty.num_of_args == 2
    assert fty.param_type(1) is fptr
    assert fty.return_type is i32
    assert fty.is_function_type()
    assert fty in module.types


def test_validity_checks(module):
    assert FunctionType.is_valid_return_type(module.void_type)
    assert not FunctionType.is_valid_return_type(module.float_type)
    assert FunctionType.is_valid_argument_type(module.int32_ptr_type)
    assert not FunctionType.is_valid_argument_type(module.float_type)
    assert ArrayType.is_valid_element_type(module.float_type)
    assert not ArrayType.is_valid_element_type(module.int32_ptr_type)


def test_is_eq_type(module):
    assert is_eq_type(module.int32_type, module.int32_type)
    assert not is_eq_type(module.int32_type, module.int1_type)